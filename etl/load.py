"""
Data Loading into Google Sheets

Clears the configured range, then writes the fetched rows.
The two calls are not atomic: a failed write leaves the range cleared
until the next run.
"""

import logging

import gspread
from gspread.exceptions import APIError, SpreadsheetNotFound

from config.settings import Settings
from etl.exceptions import ServiceError
from etl.extract import UpdatePayload

logger = logging.getLogger(__name__)


class SheetLoader:
    """
    Loads an update payload into the configured spreadsheet.

    Always clears the full CLEAR_RANGE first so rows left over from a
    previous, larger run are removed.
    """

    VALUE_INPUT_OPTION = "RAW"

    def __init__(self, client: gspread.Client, settings: Settings):
        """
        Initialize sheet loader.

        Args:
            client: Authorized gspread client
            settings: Settings with SHEET_ID and CLEAR_RANGE
        """
        self.client = client
        self.settings = settings

    def update_sheet(self, payload: UpdatePayload) -> None:
        """
        Clear the destination range and write the payload rows.

        Args:
            payload: Target range and rows from the fetcher

        Raises:
            ServiceError: If the spreadsheet service rejects a call
        """
        try:
            spreadsheet = self.client.open_by_key(self.settings.SHEET_ID)

            # (1) Clear old contents
            logger.debug(f"Clearing range {self.settings.CLEAR_RANGE}")
            spreadsheet.values_clear(self.settings.CLEAR_RANGE)

            # (2) Write new rows
            logger.debug(f"Writing {len(payload.rows)} rows at {payload.range}")
            spreadsheet.values_update(
                payload.range,
                params={"valueInputOption": self.VALUE_INPUT_OPTION},
                body={"values": payload.rows},
            )

        except (SpreadsheetNotFound, PermissionError) as e:
            # gspread raises PermissionError bare, chained to the APIError
            message = (
                str(e) or str(e.__cause__ or "") or f"{type(e).__name__}: {self.settings.SHEET_ID}"
            )
            logger.error(f"Cannot open spreadsheet {self.settings.SHEET_ID}: {message}")
            raise ServiceError(message) from e
        except APIError as e:
            logger.error(f"Google Sheets API call failed: {e}")
            raise ServiceError(str(e)) from e

        logger.info(f"Wrote {len(payload.rows)} rows to {payload.range}")


def update_sheet(payload: UpdatePayload, settings: Settings, client: gspread.Client) -> None:
    """
    Convenience function to load a payload using settings.

    Args:
        payload: Rows to write
        settings: Settings object with SHEET_ID and CLEAR_RANGE
        client: Authorized gspread client
    """
    loader = SheetLoader(client, settings)
    loader.update_sheet(payload)
