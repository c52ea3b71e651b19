"""
Row Transformation

Maps source records into fixed-order sheet rows.
Column order must match the destination sheet layout exactly.
"""

import logging
from typing import Any, Dict, List

logger = logging.getLogger(__name__)

# (source field, default when absent), in sheet column order A..M
COLUMNS = [
    ("shop_name", ""),
    ("duration", ""),
    ("today_available", ""),
    ("today_percentage", ""),
    ("seven_days_available", ""),
    ("seven_days_percentage", ""),
    ("one_month_available", ""),
    ("one_month_percentage", ""),
    ("next_month_available", ""),
    ("next_month_percentage", ""),
    ("updated_at", ""),
    ("cpa", "-"),
    ("updated_daily_budget", "-"),
]

Row = List[Any]


class RowTransformer:
    """
    Transforms source records into sheet rows.

    Field absence is masked with defaults instead of failing, so one
    malformed record never aborts the batch. Present values are copied
    verbatim (no type coercion).
    """

    def __init__(self):
        self.metrics = {
            "total_records": 0,
            "non_object_records": 0,
        }

    def transform(self, records: List[Any]) -> List[Row]:
        """
        Map every record to a row, preserving input order.

        Args:
            records: Elements of the source ``data`` array

        Returns:
            One row per record, same order
        """
        self.metrics["total_records"] = len(records)
        rows = [self.to_row(record) for record in records]

        if self.metrics["non_object_records"]:
            logger.warning(
                f"{self.metrics['non_object_records']} records were not JSON objects; "
                f"written with default values"
            )

        logger.debug(f"Transformed {len(rows)} records into rows")
        return rows

    def to_row(self, record: Any) -> Row:
        """
        Map a single record to its 13 column values.

        A field that is missing or null takes its column default.
        """
        if not isinstance(record, dict):
            self.metrics["non_object_records"] += 1
            record = {}

        return [_value_or_default(record, field, default) for field, default in COLUMNS]


def _value_or_default(record: Dict[str, Any], field: str, default: str) -> Any:
    value = record.get(field)
    return default if value is None else value


def transform_records(records: List[Any]) -> List[Row]:
    """
    Convenience function to transform fetched records.

    Args:
        records: Elements of the source ``data`` array

    Returns:
        List of rows in input order
    """
    transformer = RowTransformer()
    return transformer.transform(records)
