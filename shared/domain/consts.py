"""Constants to avoid string typos and magic numbers."""

from enum import Enum


class SolutionFormType(str, Enum):
    """How a problem is presented to the user and what its answer looks like."""
    MULTI_SELECT = "MultiSelect"
    SELECT = "Select"
    INPUT = "Input"
    MULTILINE_INPUT = "MultiLineInput"
    PASSWORD = "Password"
    CONFIRM = "Confirm"


class CacheDocument:
    """Type and version tags of the persisted cache document."""
    KIND = "QACache"
    API_VERSION = "qaengine.io/v1alpha1"


class BackendExtension:
    """File extensions used to pick a persistence backend."""
    JSON = (".json",)


class AddSolutionStatus(str, Enum):
    """Status values for add-solution responses."""
    CACHED = "CACHED"


class ProblemDisplay:
    """Constants for problem display."""
    DESC_PREFIX_LENGTH = 40  # Characters of a description shown in logs
