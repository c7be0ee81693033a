"""QA engine infrastructure layer."""

from qaengine.infrastructure.cache import SolutionCache

__all__ = [
    "SolutionCache",
]
