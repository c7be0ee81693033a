"""Domain models and entities."""

from shared.domain.models import (
    AddSolutionResult,
    CacheSpec,
    ObjectMeta,
    Problem,
    QACacheDocument,
)
from shared.domain.artifact import Artifact, LabelSelector, LabelSelectorRequirement
from shared.domain.consts import (
    AddSolutionStatus,
    BackendExtension,
    CacheDocument,
    ProblemDisplay,
    SolutionFormType,
)
from shared.domain.errors import (
    CacheIOError,
    CacheParseError,
    CacheWriteError,
    ConfigNotFoundError,
    InvalidStateError,
    PolicyViolationError,
    QACacheError,
    SolutionNotFoundError,
)

__all__ = [
    "AddSolutionResult",
    "CacheSpec",
    "ObjectMeta",
    "Problem",
    "QACacheDocument",
    "Artifact",
    "LabelSelector",
    "LabelSelectorRequirement",
    "AddSolutionStatus",
    "BackendExtension",
    "CacheDocument",
    "ProblemDisplay",
    "SolutionFormType",
    "CacheIOError",
    "CacheParseError",
    "CacheWriteError",
    "ConfigNotFoundError",
    "InvalidStateError",
    "PolicyViolationError",
    "QACacheError",
    "SolutionNotFoundError",
]
