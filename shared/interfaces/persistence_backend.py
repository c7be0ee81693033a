"""Abstract persistence backend interface."""

from abc import ABC, abstractmethod
from typing import Any, Dict


class PersistenceBackend(ABC):
    """Abstract persistence backend interface.
    
    All backends must implement:
    - read: Decode the structured document stored at a path
    - write: Encode a structured document to a path
    """
    
    @abstractmethod
    def read(self, path: str) -> Dict[str, Any]:
        """Read a structured document.
        
        Raises:
            CacheIOError: If the path cannot be read
            CacheParseError: If the content is not a structured document
        """
        pass
    
    @abstractmethod
    def write(self, path: str, document: Dict[str, Any]) -> None:
        """Write a structured document, creating parent directories.
        
        Raises:
            CacheIOError: If the path cannot be written
        """
        pass
