"""Question engine that answers with problem defaults."""

import logging
from shared.domain.consts import SolutionFormType
from shared.domain.errors import InvalidStateError
from shared.domain.models import Problem
from shared.interfaces.question_engine import QuestionEngine

logger = logging.getLogger(__name__)


class DefaultEngine(QuestionEngine):
    """
    Non-interactive engine: every problem is answered with its default.
    
    Confirm problems default to False and MultiSelect problems to no
    selection when they carry no default of their own.
    """
    
    def fetch_answer(self, problem: Problem) -> Problem:
        answer = problem.default
        if answer is None:
            if problem.type == SolutionFormType.CONFIRM:
                answer = False
            elif problem.type == SolutionFormType.MULTI_SELECT:
                answer = []
            else:
                raise InvalidStateError(
                    f"problem {problem.id} has no default and cannot be answered non-interactively"
                )
        logger.debug(f"Answering {problem.id} with default {answer!r}")
        return problem.with_answer(answer)
