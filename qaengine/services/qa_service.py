"""Cache-first resolution of problems."""

import logging
from shared.domain.consts import ProblemDisplay
from shared.domain.errors import CacheIOError, PolicyViolationError, SolutionNotFoundError
from shared.domain.models import Problem
from shared.interfaces.question_engine import QuestionEngine
from qaengine.infrastructure.cache import SolutionCache

logger = logging.getLogger(__name__)


class QAService:
    """
    Resolves problems from the cache and asks the engine only on a miss.

    Answers coming from the engine are cached so the next run skips them.
    Caching is best-effort: policy rejections and write failures are logged
    and the answer is still returned.
    """

    def __init__(self, cache: SolutionCache, engine: QuestionEngine) -> None:
        self.cache = cache
        self.engine = engine

    def fetch_answer(self, problem: Problem) -> Problem:
        """
        Resolve a problem.

        Returns:
            Copy of the problem with its answer set.

        Raises:
            Whatever the engine raises when it cannot answer.
        """
        desc = problem.desc[:ProblemDisplay.DESC_PREFIX_LENGTH]
        try:
            solution = self.cache.get_solution(problem)
            logger.info(f"Cache hit for {problem.id} ({desc})")
            return solution
        except SolutionNotFoundError:
            logger.debug(f"Cache miss for {problem.id} ({desc}), asking engine")

        solution = self.engine.fetch_answer(problem)

        try:
            self.cache.add_solution(solution)
        except PolicyViolationError as e:
            logger.debug(f"Not caching {problem.id}: {e}")
        except CacheIOError as e:
            logger.warning(f"Answer for {problem.id} cached for this process only: {e}")

        return solution
