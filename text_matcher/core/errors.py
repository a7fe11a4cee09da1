"""Exceptions and argument guards for the text matching system."""

from typing import Any, Optional

import pandas as pd


class TextMatcherError(Exception):
    """Base exception for all text matcher errors."""

    def __init__(self, message: str, detail: Optional[str] = None):
        self.message = message
        self.detail = detail
        super().__init__(self.message)


class InvalidArgumentError(TextMatcherError, ValueError):
    """Raised when an operation is called outside its preconditions."""
    pass


class NullArgumentError(InvalidArgumentError):
    """Raised when a required input is absent."""
    pass


class EmptyQueryError(InvalidArgumentError):
    """Raised when a query is empty after normalization."""
    pass


def is_missing(value: Any) -> bool:
    """Check if value is None or a pandas missing scalar (NaN, NA, NaT)."""
    if value is None:
        return True
    return pd.api.types.is_scalar(value) and bool(pd.isna(value))


def require_non_null(value: Any, name: str) -> Any:
    """
    Return value unchanged, or raise if it is absent.

    Args:
        value: Value to check
        name: Parameter name used in the error message

    Raises:
        NullArgumentError: If value is missing
    """
    if is_missing(value):
        raise NullArgumentError(f"{name} cannot be null")
    return value


def check_argument(condition: bool, message: str) -> None:
    """Raise EmptyQueryError with message unless condition holds."""
    if not condition:
        raise EmptyQueryError(message)
