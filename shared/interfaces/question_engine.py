"""Abstract question engine interface."""

from abc import ABC, abstractmethod
from shared.domain.models import Problem


class QuestionEngine(ABC):
    """Source of answers for problems the cache could not resolve."""
    
    @abstractmethod
    def fetch_answer(self, problem: Problem) -> Problem:
        """Resolve a problem.
        
        Returns:
            Copy of the problem with its answer set
        """
        pass
