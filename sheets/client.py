"""
Google Sheets Client

Builds an authorized gspread client once per run.
The orchestrator owns the client and passes it to the loader.
"""

import logging
from typing import Optional

import google.auth
import gspread
from google.oauth2.service_account import Credentials

logger = logging.getLogger(__name__)

SCOPES = ["https://www.googleapis.com/auth/spreadsheets"]


def get_credentials(credentials_path: Optional[str] = None):
    """
    Resolve credentials scoped to spreadsheet read-write access.

    Args:
        credentials_path: Service account JSON file; when unset,
            Application Default Credentials are used

    Returns:
        google.auth credentials

    Raises:
        FileNotFoundError: If credentials file not found
        google.auth.exceptions.DefaultCredentialsError: If no ambient credentials exist
    """
    if credentials_path:
        logger.debug(f"Using service account file: {credentials_path}")
        return Credentials.from_service_account_file(credentials_path, scopes=SCOPES)

    credentials, project = google.auth.default(scopes=SCOPES)
    logger.debug(f"Using application default credentials (project={project})")
    return credentials


def get_sheets_client(credentials_path: Optional[str] = None) -> gspread.Client:
    """
    Authenticate with Google Sheets API.

    Args:
        credentials_path: Optional service account JSON file

    Returns:
        Authorized gspread client
    """
    try:
        client = gspread.authorize(get_credentials(credentials_path))
        logger.info("Successfully authenticated with Google Sheets API")
        return client
    except FileNotFoundError:
        logger.error(f"Credentials file not found: {credentials_path}")
        raise
