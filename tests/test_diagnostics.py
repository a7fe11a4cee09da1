"""Tests for exception formatting."""

import pytest

from text_matcher.core.diagnostics import describe
from text_matcher.core.errors import NullArgumentError


def _fail_to_parse_score():
    raise ValueError("bad score")


class TestDescribe:

    def test_raised_error_has_message_and_traceback(self):
        try:
            _fail_to_parse_score()
        except ValueError as e:
            text = describe(e)

        assert text.startswith("bad score\n")
        assert "Traceback (most recent call last)" in text
        assert "_fail_to_parse_score" in text
        assert text.rstrip().endswith("ValueError: bad score")

    def test_unraised_error(self):
        assert describe(RuntimeError("boom")) == "boom\nRuntimeError: boom\n"

    def test_error_without_message(self):
        assert describe(RuntimeError()) == "\nRuntimeError\n"

    def test_chained_cause_included(self):
        try:
            try:
                _fail_to_parse_score()
            except ValueError as e:
                raise KeyError("score") from e
        except KeyError as e:
            text = describe(e)

        assert "ValueError: bad score" in text
        assert "direct cause" in text

    def test_null_rejected(self):
        with pytest.raises(NullArgumentError):
            describe(None)
