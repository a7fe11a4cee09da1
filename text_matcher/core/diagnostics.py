"""Render exceptions into a single string for log output."""

import traceback

from text_matcher.core.errors import require_non_null

def describe(error: BaseException) -> str:
    """
    Return the error message followed by its full traceback.

    Chained causes are included. Errors that were never raised render
    as just their type and message.

    Raises:
        NullArgumentError: If error is missing
    """
    require_non_null(error, 'error')
    stack_trace = ''.join(
        traceback.format_exception(type(error), error, error.__traceback__)
    )
    return f"{error}\n{stack_trace}"
