"""Matcher for problems answered by picking from options."""

from shared.domain.consts import SolutionFormType
from shared.domain.models import Problem
from shared.implementations.matchers.default_matcher import DefaultProblemMatcher


class OptionsProblemMatcher(DefaultProblemMatcher):
    """Select/MultiSelect matcher.
    
    On top of the default identity rules, a stored answer only applies when it
    is still a valid choice among the candidate's options. A candidate without
    options accepts any stored answer.
    """
    
    def matches(self, stored: Problem, candidate: Problem) -> bool:
        if not super().matches(stored, candidate):
            return False
        if stored.answer is None or not candidate.options:
            return True
        if stored.type == SolutionFormType.MULTI_SELECT:
            selected = stored.answer if isinstance(stored.answer, list) else [stored.answer]
            return all(value in candidate.options for value in selected)
        return stored.answer in candidate.options
