"""Case-insensitive text matching for free-text record search."""

import logging
from typing import Tuple

from text_matcher.core.errors import check_argument, require_non_null
from text_matcher.core.normalizer import normalize, split_query, split_sentence

logger = logging.getLogger(__name__)


def _prepare(sentence: str, query: str, label: str = 'Query') -> Tuple[str, str]:
    """Normalize both operands after checking the shared preconditions."""
    require_non_null(sentence, 'sentence')
    require_non_null(query, 'query')

    prepped_sentence = normalize(sentence)
    prepped_query = normalize(query)

    check_argument(bool(prepped_query), f"{label} parameter cannot be empty")
    return prepped_sentence, prepped_query


def matches_ignore_case(sentence: str, other: str) -> bool:
    """
    Check if two strings are equal, ignoring case and surrounding whitespace.

    Examples:
        matches_ignore_case("abcd", "abc") -> False
        matches_ignore_case("ABc def", "abc def") -> True

    Args:
        sentence: Stored text
        other: Text to compare against, cannot be empty

    Returns:
        bool: Whether the normalized strings are identical
    """
    prepped_sentence, prepped_other = _prepare(sentence, other, 'Sentence')
    return prepped_sentence == prepped_other


def contains_ignore_case(sentence: str, query: str) -> bool:
    """
    Check if query appears anywhere in sentence, ignoring case.

    A full word match is not required: "bc def" is found in "ABc def".

    Args:
        sentence: Text to search in
        query: Text to search for, cannot be empty

    Returns:
        bool: Whether the normalized query is a substring of the sentence
    """
    prepped_sentence, prepped_query = _prepare(sentence, query)
    return prepped_query in prepped_sentence


def contains_ordered_substring(sentence: str, query: str) -> bool:
    """
    Check if the query words appear in sentence as consecutive words.

    Words must line up one to one, in order. Only the last query word may
    be a prefix of the word it lines up with.

    Examples:
        contains_ordered_substring("ABc def", "abc") -> True
        contains_ordered_substring("ABc def", "DEF") -> True
        contains_ordered_substring("ABc def", "AB") -> True
        contains_ordered_substring("ABc def", "de") -> True
        contains_ordered_substring("ABc def", "bc def") -> False

    Args:
        sentence: Text to search in
        query: Words to search for, cannot be empty

    Returns:
        bool: Whether some window of sentence words starts with the query
    """
    prepped_sentence, prepped_query = _prepare(sentence, query)

    sentence_words = split_sentence(prepped_sentence)
    query_words = split_query(prepped_query)
    window_size = len(query_words)

    if window_size > len(sentence_words):
        return False

    query_joined = ' '.join(query_words)

    for offset in range(len(sentence_words) - window_size + 1):
        # Every window word, the last included, is followed by a space
        window_joined = ''.join(
            word + ' ' for word in sentence_words[offset:offset + window_size]
        )
        if window_joined.startswith(query_joined):
            logger.debug(f"Ordered match for '{query_joined}' at word {offset}")
            return True

    return False
