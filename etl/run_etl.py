"""
Sheet Sync Orchestrator

Coordinates one sync run:
- Load settings from the environment
- Fetch rows from the source API
- Clear and rewrite the destination range in Google Sheets
- Log progress and a metrics summary
"""

import logging
import os
import sys
from typing import Optional

import gspread
import httpx
from dotenv import find_dotenv, load_dotenv

from config.settings import ConfigError, Settings
from etl.extract import SourceApiExtractor
from etl.load import SheetLoader
from etl.metrics import RunMetrics
from sheets.client import get_sheets_client

logger = logging.getLogger(__name__)

EXIT_SUCCESS = 0
EXIT_CONFIG_ERROR = 1
EXIT_FAILURE = 2


class SyncOrchestrator:
    """
    Orchestrates the complete sync pipeline.

    Workflow:
    1. Fetch rows from the source API
    2. Authenticate with Google Sheets (unless a client was supplied)
    3. Clear the destination range and write the rows
    4. Log run metrics
    """

    def __init__(
        self,
        settings: Settings,
        sheets_client: Optional[gspread.Client] = None,
        http_client: Optional[httpx.Client] = None,
    ):
        """
        Initialize sync orchestrator.

        Args:
            settings: Validated job settings
            sheets_client: Authorized gspread client (default: built from settings on first use)
            http_client: HTTP client for the source API (default: one per fetch)
        """
        self.settings = settings
        self.sheets_client = sheets_client
        self.http_client = http_client
        self.metrics: Optional[RunMetrics] = None

    def run(self) -> bool:
        """
        Execute the complete sync pipeline.

        Returns:
            True if successful, False otherwise
        """
        self.metrics = RunMetrics()

        try:
            logger.info("Fetching rows from API...")
            payload = SourceApiExtractor(self.settings, client=self.http_client).fetch_rows()
            self.metrics.rows_fetched = len(payload.rows)

            logger.info(f"Fetched {len(payload.rows)} rows. Updating sheet...")
            SheetLoader(self._get_sheets_client(), self.settings).update_sheet(payload)
            self.metrics.rows_written = len(payload.rows)

            self.metrics.finish("success")
            logger.info("Update Google Sheets Successfully!")
            self.metrics.log_summary()
            return True

        except Exception as e:
            self.metrics.finish("failed")
            logger.error(f"ERROR: {e}", exc_info=True)
            return False

    def _get_sheets_client(self) -> gspread.Client:
        if self.sheets_client is None:
            self.sheets_client = get_sheets_client(self.settings.GOOGLE_CREDENTIALS_PATH)
        return self.sheets_client


_HANDLER_MARK = "_sheet_sync_handler"


def setup_logging(level: str = "INFO", log_file: Optional[str] = None) -> None:
    """
    Configure logging for the sync job.

    Calling it again replaces the handlers installed by a previous call.

    Args:
        level: Console log level name
        log_file: Optional path to a DEBUG log file
    """
    reset_logging()
    root_logger = logging.getLogger()

    formatter = logging.Formatter(
        "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    handlers = []

    # Console handler
    console_handler = logging.StreamHandler()
    console_handler.setLevel(getattr(logging, level.upper(), logging.INFO))
    handlers.append(console_handler)

    # File handler
    if log_file:
        log_dir = os.path.dirname(log_file)
        if log_dir:
            os.makedirs(log_dir, exist_ok=True)
        file_handler = logging.FileHandler(log_file)
        file_handler.setLevel(logging.DEBUG)
        handlers.append(file_handler)

    for handler in handlers:
        handler.setFormatter(formatter)
        setattr(handler, _HANDLER_MARK, True)
        root_logger.addHandler(handler)

    root_logger.setLevel(logging.DEBUG)


def reset_logging() -> None:
    """Remove the handlers installed by setup_logging()."""
    root_logger = logging.getLogger()
    for handler in list(root_logger.handlers):
        if getattr(handler, _HANDLER_MARK, False):
            root_logger.removeHandler(handler)
            handler.close()


def main() -> int:
    """Main entry point for the sync job."""
    setup_logging()
    load_dotenv(find_dotenv(usecwd=True))

    try:
        settings = Settings.from_env()
    except ConfigError as e:
        logger.error(str(e))
        return EXIT_CONFIG_ERROR

    try:
        setup_logging(settings.LOG_LEVEL, settings.LOG_FILE)
    except OSError as e:
        setup_logging(settings.LOG_LEVEL)
        logger.error(f"ERROR: cannot open log file {settings.LOG_FILE}: {e}")
        return EXIT_FAILURE

    logger.debug(f"Loaded {settings!r}")

    orchestrator = SyncOrchestrator(settings)
    success = orchestrator.run()
    return EXIT_SUCCESS if success else EXIT_FAILURE


if __name__ == "__main__":
    sys.exit(main())
