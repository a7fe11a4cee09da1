"""Case folding and tokenization shared by the matchers."""

from functools import lru_cache
from typing import List

from text_matcher.core.errors import require_non_null

@lru_cache(maxsize=10000)
def _fold(text: str) -> str:
    return text.lower().strip()

def normalize(text: str) -> str:
    """
    Lower-case and trim a string.

    Normalizing an already normalized string returns it unchanged.

    Args:
        text: String to normalize

    Returns:
        str: Case-folded, trimmed copy of text

    Raises:
        NullArgumentError: If text is missing
    """
    require_non_null(text, 'text')
    return _fold(text)

def split_sentence(normalized: str) -> List[str]:
    """
    Split a normalized candidate on single spaces and trim each token.

    Consecutive spaces produce empty tokens, so token positions follow
    the stored text exactly. Tabs and newlines beside a space are
    trimmed off the token they touch.
    """
    return [word.strip() for word in normalized.split(' ')]

def split_query(normalized: str) -> List[str]:
    """Split a normalized query on runs of whitespace."""
    return normalized.split()
