"""
Response Shape Validation

Guards against upstream API contract changes before any row reaches the sheet.
Validators return (is_valid, error_message) tuples; the caller decides what to raise.
"""

import logging
from abc import ABC, abstractmethod
from typing import Any, Optional, Tuple

logger = logging.getLogger(__name__)

SHAPE_ERROR_MESSAGE = "Invalid API response shape (missing data array)."


class Validator(ABC):
    """Abstract base class for response validators."""

    @abstractmethod
    def validate(self, value: Any) -> Tuple[bool, Optional[str]]:
        """
        Validate a value.

        Returns:
            Tuple of (is_valid, error_message)
        """
        pass


class DataArrayValidator(Validator):
    """Validates that a decoded body is an object holding a ``data`` list."""

    def validate(self, value: Any) -> Tuple[bool, Optional[str]]:
        """
        Validate the decoded JSON body.

        Args:
            value: Decoded JSON body (may be None)

        Returns:
            Tuple of (is_valid, error_message)
        """
        if not value or not isinstance(value, dict):
            return False, SHAPE_ERROR_MESSAGE

        if not isinstance(value.get("data"), list):
            logger.debug(f"'data' field has type {type(value.get('data')).__name__}")
            return False, SHAPE_ERROR_MESSAGE

        return True, None
