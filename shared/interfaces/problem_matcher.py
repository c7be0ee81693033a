"""Abstract problem matcher interface."""

from abc import ABC, abstractmethod
from shared.domain.models import Problem


class ProblemMatcher(ABC):
    """Abstract problem matcher interface.
    
    A matcher decides whether a stored problem and a newly posed one denote
    the same real-world question, even when their IDs differ.
    """
    
    @abstractmethod
    def matches(self, stored: Problem, candidate: Problem) -> bool:
        """Check whether ``stored`` applies to ``candidate``.
        
        Args:
            stored: Problem already held by a cache
            candidate: Problem being looked up or merged
            
        Returns:
            True if both denote the same question
        """
        pass
