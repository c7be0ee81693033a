"""Error taxonomy for the solution cache."""

from typing import Any


class QACacheError(Exception):
    """Base class for all solution cache errors."""


class PolicyViolationError(QACacheError):
    """Raised when a solution may not be cached by policy (e.g. passwords)."""


class InvalidStateError(QACacheError):
    """Raised when a problem is not in a state that allows the operation."""


class SolutionNotFoundError(QACacheError):
    """
    Raised when no cached solution applies to a problem.

    The original, unmodified problem is kept on the ``problem`` attribute so
    that callers can fall back to asking the user.
    """

    def __init__(self, problem: Any) -> None:
        self.problem = problem
        super().__init__(f"the problem {problem.id!r} was not found in the cache")


class CacheIOError(QACacheError):
    """Raised when the backing file cannot be read or written."""


class CacheWriteError(CacheIOError):
    """Raised when a solution was cached in memory but could not be flushed."""


class CacheParseError(QACacheError):
    """Raised when the backing file cannot be decoded into a cache document."""


class ConfigNotFoundError(QACacheError):
    """Raised when an artifact does not carry the requested config."""
