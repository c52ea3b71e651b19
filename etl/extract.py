"""
Source API Data Extraction

Fetches records from the source HTTP API and maps them into sheet rows.
One GET per run: no pagination, no retries.
"""

import logging
from dataclasses import dataclass
from typing import Any, List, Optional

import httpx

from config.settings import Settings
from etl.exceptions import ShapeError, TransportError
from etl.transform import Row, transform_records
from etl.validator import DataArrayValidator

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class UpdatePayload:
    """Target range plus the ordered rows to write there."""
    range: str
    rows: List[Row]


class SourceApiExtractor:
    """
    Extracts rows from the source API.

    Sends the API key in the ``X-API-KEY`` header and expects a JSON
    object with a ``data`` array.
    """

    API_KEY_HEADER = "X-API-KEY"

    def __init__(self, settings: Settings, client: Optional[httpx.Client] = None):
        """
        Initialize source API extractor.

        Args:
            settings: Settings with SOURCE_API_URL, SOURCE_API_KEY and WRITE_RANGE
            client: HTTP client to use (default: a new httpx.Client owned by the extractor)
        """
        self.settings = settings
        self.client = client
        self.validator = DataArrayValidator()

    def fetch_rows(self) -> UpdatePayload:
        """
        Fetch source records and map them into an update payload.

        Returns:
            UpdatePayload anchored at the configured write range

        Raises:
            TransportError: If the API answers with a non-success status
            ShapeError: If the body lacks a data array
            httpx.HTTPError: If the request itself fails
        """
        records = self._fetch_records()
        rows = transform_records(records)
        return UpdatePayload(range=self.settings.WRITE_RANGE, rows=rows)

    def _fetch_records(self) -> List[Any]:
        headers = {
            "Accept": "application/json",
            self.API_KEY_HEADER: self.settings.SOURCE_API_KEY,
        }

        if self.client is not None:
            response = self.client.get(
                self.settings.SOURCE_API_URL, headers=headers, follow_redirects=True
            )
        else:
            with httpx.Client() as client:
                response = client.get(
                    self.settings.SOURCE_API_URL, headers=headers, follow_redirects=True
                )

        if not response.is_success:
            logger.error(f"Source API returned HTTP {response.status_code}")
            raise TransportError(response.status_code)

        try:
            body = response.json()
        except ValueError as e:
            logger.error(f"Source API body is not valid JSON: {e}")
            raise ShapeError("Invalid API response shape (body is not JSON).") from e

        is_valid, error = self.validator.validate(body)
        if not is_valid:
            raise ShapeError(error)

        records = body["data"]
        logger.debug(f"Source API returned {len(records)} records")
        return records


def fetch_rows(settings: Settings, client: Optional[httpx.Client] = None) -> UpdatePayload:
    """
    Convenience function to fetch rows using settings.

    Args:
        settings: Settings object with the source API configuration
        client: Optional HTTP client

    Returns:
        UpdatePayload with rows in source order
    """
    extractor = SourceApiExtractor(settings, client=client)
    return extractor.fetch_rows()
