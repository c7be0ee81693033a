"""JSON persistence backend."""

import json
import logging
from typing import Any, Dict
from shared.domain.errors import CacheIOError, CacheParseError
from shared.implementations.backends.atomic_file import write_atomically
from shared.interfaces.persistence_backend import PersistenceBackend

logger = logging.getLogger(__name__)


class JsonBackend(PersistenceBackend):
    """Reads and writes documents as indented JSON."""
    
    def read(self, path: str) -> Dict[str, Any]:
        try:
            with open(path, "r", encoding="utf-8") as f:
                document = json.load(f)
        except OSError as e:
            raise CacheIOError(f"unable to read {path}: {e}") from e
        except json.JSONDecodeError as e:
            raise CacheParseError(f"unable to parse {path} as JSON: {e}") from e
        
        if not isinstance(document, dict):
            raise CacheParseError(f"{path} does not contain a JSON object")
        logger.debug(f"Read JSON document from {path}")
        return document
    
    def write(self, path: str, document: Dict[str, Any]) -> None:
        try:
            write_atomically(path, lambda f: json.dump(document, f, indent=2))
        except (OSError, TypeError, ValueError) as e:
            raise CacheIOError(f"unable to write {path}: {e}") from e
        logger.debug(f"Wrote JSON document to {path}")
