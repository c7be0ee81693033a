"""Factory for resolving problem matchers by form type."""

from shared.interfaces.problem_matcher import ProblemMatcher
from shared.implementations.matchers import DefaultProblemMatcher, OptionsProblemMatcher
from shared.domain.consts import SolutionFormType


MATCHERS: dict[str, ProblemMatcher] = {
    SolutionFormType.INPUT: DefaultProblemMatcher(),
    SolutionFormType.MULTILINE_INPUT: DefaultProblemMatcher(),
    SolutionFormType.PASSWORD: DefaultProblemMatcher(),
    SolutionFormType.CONFIRM: DefaultProblemMatcher(),
    SolutionFormType.SELECT: OptionsProblemMatcher(),
    SolutionFormType.MULTI_SELECT: OptionsProblemMatcher(),
}


def create_matcher(form_type: str) -> ProblemMatcher:
    """Factory for problem matchers.
    
    Matchers are stateless, so the registered instance is shared.
        
    Returns:
        ProblemMatcher for the form type
        
    Raises:
        ValueError: If form_type is unknown
    """
    try:
        return MATCHERS[form_type]
    except KeyError:
        raise ValueError(f"Unknown solution form type: {form_type}")
