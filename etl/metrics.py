"""
Run Metrics

Per-run counters and timings, logged in the closing summary.
Nothing is persisted between runs.
"""

import logging
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Optional

logger = logging.getLogger(__name__)


def _now() -> datetime:
    return datetime.now(timezone.utc)


@dataclass
class RunMetrics:
    """Metrics for a single sync run."""
    start_time: datetime = field(default_factory=_now)
    end_time: Optional[datetime] = None
    rows_fetched: int = 0
    rows_written: int = 0
    status: str = "in_progress"

    def finish(self, status: str) -> None:
        self.end_time = _now()
        self.status = status

    @property
    def duration_seconds(self) -> float:
        """Elapsed seconds, up to now if the run has not finished."""
        end = self.end_time or _now()
        return (end - self.start_time).total_seconds()

    @property
    def throughput(self) -> float:
        """Calculate rows per second."""
        if self.duration_seconds == 0:
            return 0.0
        return self.rows_written / self.duration_seconds

    def log_summary(self) -> None:
        """Log run summary with all metrics."""
        logger.info(f"Status: {self.status}")
        logger.info(f"Duration: {self.duration_seconds:.2f} seconds")
        logger.info(f"Rows fetched: {self.rows_fetched}")
        logger.info(f"Rows written: {self.rows_written}")
        logger.info(f"Throughput: {self.throughput:.2f} rows/second")
