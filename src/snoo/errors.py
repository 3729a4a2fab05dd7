"""Exceptions raised by snoo.

Transport failures are not wrapped: ``requests`` exceptions reach the caller
as-is.
"""

from typing import List, Tuple


class RedditError(Exception):
    """Base class for errors raised by snoo itself."""


class InvalidArgumentError(RedditError, ValueError):
    """A call was made with arguments that cannot produce a request."""


class InvalidOptionsError(RedditError, TypeError):
    """Submission options could not be form-encoded."""


class SubmissionError(RedditError):
    """Reddit rejected a submission and reported why in ``json.errors``."""

    def __init__(self, errors: List[Tuple[str, str, str]]):
        self.errors = errors
        detail = "; ".join(
            f"{code}: {message}" + (f" ({field})" if field else "")
            for code, message, field in errors
        )
        super().__init__(f"submission rejected: {detail}")
