"""Problem matcher implementations."""

from shared.implementations.matchers.default_matcher import DefaultProblemMatcher
from shared.implementations.matchers.options_matcher import OptionsProblemMatcher

__all__ = ["DefaultProblemMatcher", "OptionsProblemMatcher"]
