"""
Record Text Matcher
===================

Text matching and validation helpers for searching and checking
user-entered record fields such as names, scores and identifiers.

Key Features:
- Case-insensitive containment and equality matching
- Ordered word matching that tolerates a truncated final word
- Numeric validators for identifiers and scores
- Exception formatting for log output
- Record search and field validation over pandas dataframes
"""

from text_matcher.core.matcher import (
    contains_ignore_case,
    contains_ordered_substring,
    matches_ignore_case
)
from text_matcher.core.validator import (
    NumericValidator,
    has_more_than_two_decimal_places,
    is_double,
    is_non_zero_unsigned_integer
)
from text_matcher.core.diagnostics import describe
from text_matcher.core.errors import (
    EmptyQueryError,
    InvalidArgumentError,
    NullArgumentError,
    TextMatcherError
)
from text_matcher.core.searcher import RecordSearcher

from text_matcher.config.models import (
    ColumnSearchConfig,
    MatchMethod,
    NumericConfig,
    SearchStrategy
)
from text_matcher.config.rules import (
    DecimalRule,
    NonEmptyRule,
    NonZeroUnsignedIntegerRule,
    PatternRule,
    ValidationRules
)

__version__ = "1.0.0"
