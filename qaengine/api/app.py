"""FastAPI application exposing a solution cache."""

import logging
from typing import List, Optional
from fastapi import FastAPI, HTTPException, Response
from shared.config.config import config
from shared.domain.consts import AddSolutionStatus
from shared.domain.errors import (
    CacheIOError,
    CacheParseError,
    CacheWriteError,
    InvalidStateError,
    PolicyViolationError,
    SolutionNotFoundError,
)
from shared.domain.models import AddSolutionResult, Problem
from qaengine.infrastructure.cache import SolutionCache

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s - %(message)s"

logger = logging.getLogger(__name__)


def _cache_from_config() -> SolutionCache:
    """
    Build a cache from the environment and load its file if present.

    A missing or unreadable file is not fatal here: the service starts with
    an empty cache and creates the file on the first solution.
    """
    cache = SolutionCache(config.QA_CACHE_FILE, config.QA_PERSIST_PASSWORDS)
    try:
        cache.load()
    except (CacheIOError, CacheParseError) as e:
        logger.info(f"Starting with an empty cache: {e}")
    return cache


def create_app(cache: Optional[SolutionCache] = None) -> FastAPI:
    """
    Create the API around an explicit cache instance.

    Run with ``uvicorn --factory qaengine.api.app:create_app`` to use the
    cache configured through the environment.
    """
    logging.basicConfig(level=config.LOG_LEVEL, format=LOG_FORMAT)

    if cache is None:
        cache = _cache_from_config()

    app = FastAPI(title="QA Solution Cache")
    app.state.cache = cache

    @app.get("/health")
    def health_check() -> dict:
        """
        Health check endpoint.

        Returns:
            Dict with status "ok" if service is healthy.
        """
        return {"status": "ok"}

    @app.get("/solutions", response_model=List[Problem])
    def list_solutions() -> List[Problem]:
        """Return cached solutions in order."""
        return list(cache.solutions)

    @app.post("/solutions/lookup", response_model=Problem)
    def lookup_solution(problem: Problem) -> Problem:
        """
        Resolve a problem from the cache.

        Raises:
            HTTPException: If no cached solution applies (404 status).
        """
        try:
            return cache.get_solution(problem)
        except SolutionNotFoundError as e:
            raise HTTPException(status_code=404, detail=str(e))

    @app.post("/solutions", response_model=AddSolutionResult, status_code=201)
    def add_solution(problem: Problem, response: Response) -> AddSolutionResult:
        """
        Cache a solved problem.

        A failed write still caches the solution in memory; that case is
        reported with status 200 and ``persisted`` false.

        Raises:
            HTTPException: 403 if the policy forbids caching the problem,
                422 if the problem is unresolved.
        """
        try:
            cache.add_solution(problem)
        except PolicyViolationError as e:
            raise HTTPException(status_code=403, detail=str(e))
        except InvalidStateError as e:
            raise HTTPException(status_code=422, detail=str(e))
        except CacheWriteError as e:
            response.status_code = 200
            return AddSolutionResult(
                status=AddSolutionStatus.CACHED,
                persisted=False,
                error_message=str(e),
            )

        logger.info(f"Cached solution for {problem.id}")
        return AddSolutionResult(status=AddSolutionStatus.CACHED, persisted=True)

    return app
