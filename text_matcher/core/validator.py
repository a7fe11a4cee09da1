"""Numeric string validation for identifier and score fields."""

import logging
from typing import Optional

import regex as re

from text_matcher.config.models import NumericConfig, ParseResult
from text_matcher.core.errors import require_non_null

logger = logging.getLogger(__name__)


class NumericValidator:
    """Validates raw strings as integers and decimal numbers."""

    # ASCII digits only, no whitespace or digit separators
    INTEGER_PATTERN = re.compile(r'[+-]?[0-9]+')
    DECIMAL_PATTERN = re.compile(
        r'[+-]?(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?'
    )
    SPECIAL_PATTERN = re.compile(r'[+-]?(?:nan|inf|infinity)', re.IGNORECASE)

    def __init__(self, config: Optional[NumericConfig] = None):
        self.config = config or NumericConfig()

    def parse_integer(self, s: str) -> ParseResult:
        """
        Parse a base-10 integer within the configured range.

        Malformed or out-of-range input gives a failed result instead of
        raising.

        Args:
            s: Raw string, not trimmed

        Returns:
            ParseResult: Parsed int, or the reason parsing failed
        """
        if not self.INTEGER_PATTERN.fullmatch(s):
            logger.debug(f"Not an integer literal: {s!r}")
            return ParseResult(error='malformed integer')

        value = int(s)
        if not self.config.integer_min <= value <= self.config.integer_max:
            logger.debug(f"Integer out of range: {s!r}")
            return ParseResult(error='integer out of range')

        return ParseResult(value=value)

    def parse_decimal(self, s: str) -> ParseResult:
        """
        Parse a floating-point literal.

        Accepts an optional sign, digits with an optional fractional part,
        and an optional exponent. NaN and infinity tokens are accepted only
        when the config allows special literals.
        """
        if self.DECIMAL_PATTERN.fullmatch(s):
            return ParseResult(value=float(s))

        if self.config.allow_special_literals and self.SPECIAL_PATTERN.fullmatch(s):
            return ParseResult(value=float(s))

        logger.debug(f"Not a decimal literal: {s!r}")
        return ParseResult(error='malformed decimal')

    def is_non_zero_unsigned_integer(self, s: str) -> bool:
        """
        Check if s is a positive integer written without a sign.

        "1", "2", ..., "2147483647" are valid. "", "-1", "0", "+1", " 2 ",
        "3 0" and "1a" are not.

        Raises:
            NullArgumentError: If s is missing
        """
        require_non_null(s, 's')
        result = self.parse_integer(s)
        return result.ok and result.value > 0 and not s.startswith('+')

    def is_double(self, s: str) -> bool:
        """
        Check if s is a valid decimal number, e.g. "123.45", "-0.123", "6.022e23".

        Raises:
            NullArgumentError: If s is missing
        """
        require_non_null(s, 's')
        return self.parse_decimal(s).ok

    def has_more_than_two_decimal_places(self, s: str) -> bool:
        """
        Check if s has more characters after its first dot than allowed.

        The characters after the dot are counted, not checked for being
        digits, so "1.abc" counts as three decimal places. "100.", "80.5"
        and "89.67" are within the limit.

        Args:
            s: Raw string to check

        Returns:
            bool: True if the fractional part is too long

        Raises:
            NullArgumentError: If s is missing
        """
        require_non_null(s, 's')
        dot_index = s.find('.')
        if dot_index == -1:
            return False
        return len(s) - dot_index - 1 > self.config.max_decimal_places

# Global validator instance
validator = NumericValidator()

def is_non_zero_unsigned_integer(s: str) -> bool:
    """Check if s is a positive unsigned integer using the default config."""
    return validator.is_non_zero_unsigned_integer(s)

def is_double(s: str) -> bool:
    """Check if s is a decimal number using the default config."""
    return validator.is_double(s)

def has_more_than_two_decimal_places(s: str) -> bool:
    """Check if s has more than two characters after its first dot."""
    return validator.has_more_than_two_decimal_places(s)
