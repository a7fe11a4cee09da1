"""Configuration models for the text matching system."""

from dataclasses import dataclass, field
from typing import Any, List, Optional
from enum import Enum

@dataclass(frozen=True)
class NumericConfig:
    """Configuration for numeric string validation."""
    integer_min: int = -2**31
    integer_max: int = 2**31 - 1  # Signed 32-bit range
    max_decimal_places: int = 2
    allow_special_literals: bool = False  # NaN / Infinity tokens

class MatchMethod(str, Enum):
    """How a query is compared against a text field."""
    CONTAINS = "contains"
    ORDERED = "ordered"
    EXACT = "exact"

@dataclass(frozen=True)
class ColumnSearchConfig:
    """Configuration for how to search a specific column."""
    name: str
    match_method: MatchMethod = MatchMethod.ORDERED
    is_required: bool = False

    def __post_init__(self):
        """Accept plain strings for the match method."""
        object.__setattr__(
            self,
            'match_method',
            MatchMethod(self.match_method)
        )

@dataclass(frozen=True)
class SearchStrategy:
    """Strategy for searching records by free text."""
    name: str
    column_configs: List[ColumnSearchConfig]
    require_all: bool = False  # Every column must match instead of any

@dataclass(frozen=True)
class ParseResult:
    """Outcome of parsing a numeric literal."""
    value: Optional[Any] = None
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.error is None

@dataclass
class FieldValidationResult:
    """Result of validating a single record field."""
    column: str
    row_index: Any
    value: Any
    is_valid: bool
    failed_rules: List[str] = field(default_factory=list)
