"""Field validation rules for user-entered record data."""

from abc import ABC, abstractmethod
from dataclasses import dataclass, replace
from typing import Any, Dict, List, Optional
import regex as re

from text_matcher.config.models import NumericConfig
from text_matcher.core.errors import is_missing
from text_matcher.core.validator import NumericValidator

class FieldRule(ABC):
    """Base class for field validation rules."""

    name: str = 'field'

    @abstractmethod
    def is_valid(self, value: str) -> bool:
        """
        Determine if a field value satisfies the rule.

        Args:
            value: Raw field value, not trimmed

        Returns:
            bool: Whether the value is valid
        """
        pass

class NonEmptyRule(FieldRule):
    """Accept values containing at least one non-whitespace character."""

    name = 'non_empty'

    def is_valid(self, value: str) -> bool:
        return bool(value.strip())

class NonZeroUnsignedIntegerRule(FieldRule):
    """Accept positive integers written without a sign, e.g. list indexes."""

    name = 'non_zero_unsigned_integer'

    def __init__(self, config: Optional[NumericConfig] = None):
        self.validator = NumericValidator(config)

    def is_valid(self, value: str) -> bool:
        return self.validator.is_non_zero_unsigned_integer(value)

class DecimalRule(FieldRule):
    """Accept decimal numbers, optionally limiting decimal places (scores)."""

    name = 'decimal'

    def __init__(
        self,
        max_decimal_places: Optional[int] = 2,
        config: Optional[NumericConfig] = None
    ):
        config = config or NumericConfig()
        if max_decimal_places is not None:
            config = replace(config, max_decimal_places=max_decimal_places)
        self.max_decimal_places = max_decimal_places
        self.validator = NumericValidator(config)

    def is_valid(self, value: str) -> bool:
        """
        Check the value is a decimal within the decimal place limit.

        The limit is the validator's config.max_decimal_places, set from
        max_decimal_places, so it need not be two.
        """
        if not self.validator.is_double(value):
            return False
        if self.max_decimal_places is None:
            return True
        return not self.validator.has_more_than_two_decimal_places(value)

class PatternRule(FieldRule):
    """Accept values fully matching a regex pattern."""

    def __init__(self, pattern: str):
        self.pattern = re.compile(pattern)
        self.name = f'pattern:{pattern}'

    def is_valid(self, value: str) -> bool:
        return bool(self.pattern.fullmatch(value))

@dataclass
class ValidationRules:
    """Configuration for which rules apply to which columns."""

    column_rules: Dict[str, List[FieldRule]]
    skip_missing: bool = True

    def rules_for(self, column_name: str) -> List[FieldRule]:
        """Return the rules registered for a column, if any."""
        return self.column_rules.get(column_name, [])

    def failed_rules(self, column_name: str, value: Any) -> List[str]:
        """
        Determine which rules a field value fails.

        Missing values pass every rule when skip_missing is set and fail
        every rule otherwise.

        Args:
            column_name: Column the value belongs to
            value: Raw field value

        Returns:
            List[str]: Names of the failed rules, empty if the value is valid
        """
        rules = self.rules_for(column_name)

        if is_missing(value):
            return [] if self.skip_missing else [rule.name for rule in rules]

        text = str(value)
        return [rule.name for rule in rules if not rule.is_valid(text)]
