"""File-backed cache of solved problems."""

import copy
import logging
import threading
from typing import Iterator, Optional, Tuple
from pydantic import ValidationError
from shared.config.config import config
from shared.domain.consts import SolutionFormType
from shared.domain.errors import (
    CacheIOError,
    CacheParseError,
    CacheWriteError,
    InvalidStateError,
    PolicyViolationError,
    SolutionNotFoundError,
)
from shared.domain.models import CacheSpec, ObjectMeta, Problem, QACacheDocument
from shared.factories.backend_factory import create_backend
from shared.interfaces.persistence_backend import PersistenceBackend

logger = logging.getLogger(__name__)


class SolutionCache:
    """
    Ordered store of solved problems bound to a backing file.

    Solutions are written through to the file on every add_solution and can
    be merged in from the file once at startup with load(). There is no
    deletion: entries accumulate or are overwritten by ID.

    Dedup rules differ on purpose:
    - add_solution overwrites the entry with the same ID in place, so a fresh
      answer always wins and the entry keeps its position
    - load skips any loaded entry that matches one already present, so the
      first loaded answer wins

    Thread-safety: add_solution and the merge done by load hold a per-instance
    lock for their whole read-modify-write sequence.
    """

    def __init__(
        self,
        path: str,
        persist_passwords: bool = False,
        backend: Optional[PersistenceBackend] = None,
        name: Optional[str] = None,
    ) -> None:
        """
        Bind an empty cache to ``path``. No I/O happens here.
        """
        self.path = path
        self.persist_passwords = persist_passwords
        self.backend = backend if backend is not None else create_backend(path)
        self.metadata = ObjectMeta(name=name if name is not None else config.QA_CACHE_NAME)
        self._problems: list[Problem] = []
        self._lock = threading.RLock()

    @property
    def solutions(self) -> Tuple[Problem, ...]:
        """Snapshot of the cached solutions in order."""
        return tuple(self._problems)

    def __len__(self) -> int:
        return len(self._problems)

    def __iter__(self) -> Iterator[Problem]:
        return iter(self.solutions)

    def load(self) -> None:
        """
        Read the backing file and merge its solutions into this cache.

        Raises:
            CacheIOError: If the file cannot be read.
            CacheParseError: If the file is not a valid cache document.

        On failure the in-memory solutions are left unchanged.
        """
        try:
            document = self._read_document()
        except (CacheIOError, CacheParseError) as e:
            logger.error(f"Unable to load the cache file at path {self.path}: {e}")
            raise

        loaded = SolutionCache.from_document(
            document,
            path=self.path,
            persist_passwords=self.persist_passwords,
            backend=self.backend,
        )
        self._merge(loaded)
        logger.info(f"Loaded {len(loaded)} solutions from {self.path} ({len(self)} cached)")

    def write(self) -> None:
        """
        Write the whole cache to the backing file.

        Raises:
            CacheIOError: Backend error, re-raised unchanged after logging.
        """
        try:
            self.backend.write(self.path, self.to_document().to_dict())
        except CacheIOError as e:
            logger.warning(f"Unable to write cache: {e}")
            raise

    def add_solution(self, problem: Problem) -> None:
        """
        Cache a solved problem and flush the cache to disk.

        An existing entry with the same ID is replaced in place, otherwise the
        problem is appended.

        Raises:
            PolicyViolationError: Password problem while passwords are not persisted.
            InvalidStateError: The problem has no answer.
            CacheWriteError: The flush failed. The solution stays cached in
                memory for the rest of the process.
        """
        if not self.persist_passwords and problem.type == SolutionFormType.PASSWORD:
            err = PolicyViolationError("passwords are not added to the cache")
            logger.debug(err)
            raise err
        if not problem.is_resolved():
            err = InvalidStateError("unresolved problem. Not going to be added to cache")
            logger.warning(err)
            raise err

        solution = problem.model_copy(deep=True)
        with self._lock:
            for i, cached in enumerate(self._problems):
                if cached.id == solution.id:
                    logger.debug(f"A solution already exists in cache for [{solution.desc}], rewriting")
                    self._problems[i] = solution
                    break
            else:
                self._problems.append(solution)

            try:
                self.write()
            except CacheIOError as e:
                logger.error(f"Failed to write to the cache file: {e}")
                raise CacheWriteError(
                    f"solution for {solution.id} cached for this process only: {e}"
                ) from e

    def get_solution(self, problem: Problem) -> Problem:
        """
        Look up a cached answer for ``problem``.

        Stored entries are scanned in order; the first one with an answer whose
        ID equals the problem's, or that matches it, wins.

        Returns:
            Copy of the problem with the cached answer set. A problem that is
            already solved is returned unchanged.

        Raises:
            SolutionNotFoundError: No cached solution applies. The original
                problem is available on the error.
        """
        if problem.is_resolved():
            logger.warning(f"Problem {problem.id} already solved.")
            return problem

        for cached in self.solutions:
            if (cached.id == problem.id or cached.matches(problem)) and cached.is_resolved():
                logger.debug(f"Cache hit for {problem.id} (cached as {cached.id})")
                return problem.model_copy(update={"answer": copy.deepcopy(cached.answer)})

        raise SolutionNotFoundError(problem)

    def to_document(self) -> QACacheDocument:
        """
        Build the document persisted for this cache.

        Password solutions (e.g. loaded from an existing file) are left out
        unless passwords are persisted.
        """
        solutions = [
            p for p in self._problems
            if self.persist_passwords or p.type != SolutionFormType.PASSWORD
        ]
        return QACacheDocument(
            metadata=self.metadata.model_copy(deep=True),
            spec=CacheSpec(solutions=solutions),
        )

    @classmethod
    def from_document(
        cls,
        document: QACacheDocument,
        path: str,
        persist_passwords: bool = False,
        backend: Optional[PersistenceBackend] = None,
    ) -> "SolutionCache":
        """Build a cache holding the document's solutions as-is."""
        cache = cls(path, persist_passwords, backend=backend, name=document.metadata.name)
        cache.metadata = document.metadata.model_copy(deep=True)
        cache._problems = list(document.spec.solutions)
        return cache

    def _read_document(self) -> QACacheDocument:
        raw = self.backend.read(self.path)
        try:
            return QACacheDocument.model_validate(raw)
        except ValidationError as e:
            raise CacheParseError(f"{self.path} is not a valid cache document: {e}") from e

    def _merge(self, other: "SolutionCache") -> None:
        """
        Append solutions from ``other`` that match nothing already cached.

        Never removes or overwrites. Unresolved entries are dropped.
        """
        with self._lock:
            for problem in other.solutions:
                if not problem.is_resolved():
                    logger.warning(f"Ignoring unresolved problem {problem.id} found in cache")
                    continue
                if any(existing.matches(problem) for existing in self._problems):
                    logger.warning(
                        f"There are two or more answers for {problem.desc or problem.id} in cache. "
                        f"Ignoring latter ones."
                    )
                    continue
                self._problems.append(problem)
