"""Tests for normalization, tokenization and argument guards."""

import math

import pandas as pd
import pytest

from text_matcher.core.errors import (
    EmptyQueryError,
    InvalidArgumentError,
    NullArgumentError,
    TextMatcherError,
    check_argument,
    is_missing,
    require_non_null
)
from text_matcher.core.normalizer import normalize, split_query, split_sentence


class TestNormalize:
    def test_lowercases_and_trims(self):
        assert normalize("  AbC Def \n") == "abc def"

    def test_idempotent(self):
        for text in ["  MiXeD Case  ", "already normal", "", "\tTabbed\t"]:
            once = normalize(text)
            assert normalize(once) == once

    def test_interior_whitespace_kept(self):
        assert normalize("A  B") == "a  b"

    def test_null_rejected(self):
        with pytest.raises(NullArgumentError):
            normalize(None)

    def test_missing_scalar_rejected(self):
        with pytest.raises(NullArgumentError):
            normalize(math.nan)


class TestSplit:
    def test_sentence_keeps_empty_words(self):
        assert split_sentence("a  b") == ["a", "", "b"]
        assert split_sentence("") == [""]

    def test_sentence_words_are_trimmed(self):
        assert split_sentence("alex \tyeo\n tan") == ["alex", "yeo", "tan"]

    def test_query_splits_on_whitespace_runs(self):
        assert split_query("a \t b") == ["a", "b"]


class TestGuards:
    """Argument guards and the error hierarchy."""

    @pytest.mark.parametrize("value", [None, math.nan, pd.NA, pd.NaT])
    def test_missing_values(self, value):
        assert is_missing(value)

    @pytest.mark.parametrize("value", ["", "x", 0, ValueError("x")])
    def test_present_values(self, value):
        assert not is_missing(value)

    def test_require_non_null_returns_value(self):
        assert require_non_null("abc", "s") == "abc"

    def test_require_non_null_names_parameter(self):
        with pytest.raises(NullArgumentError, match="query cannot be null"):
            require_non_null(None, "query")

    def test_check_argument(self):
        check_argument(True, "unused")
        with pytest.raises(EmptyQueryError, match="empty"):
            check_argument(False, "Query parameter cannot be empty")

    def test_hierarchy(self):
        assert issubclass(NullArgumentError, InvalidArgumentError)
        assert issubclass(EmptyQueryError, InvalidArgumentError)
        assert issubclass(InvalidArgumentError, TextMatcherError)
        assert issubclass(InvalidArgumentError, ValueError)

    def test_message_and_detail(self):
        error = TextMatcherError("bad input", detail="column score")
        assert error.message == "bad input"
        assert error.detail == "column score"
        assert str(error) == "bad input"
