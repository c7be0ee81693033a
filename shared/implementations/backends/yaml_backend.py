"""YAML persistence backend."""

import logging
from typing import Any, Dict
import yaml
from shared.domain.errors import CacheIOError, CacheParseError
from shared.implementations.backends.atomic_file import write_atomically
from shared.interfaces.persistence_backend import PersistenceBackend

logger = logging.getLogger(__name__)


class YamlBackend(PersistenceBackend):
    """Reads and writes documents as block-style YAML, preserving key order."""
    
    def read(self, path: str) -> Dict[str, Any]:
        try:
            with open(path, "r", encoding="utf-8") as f:
                document = yaml.safe_load(f)
        except OSError as e:
            raise CacheIOError(f"unable to read {path}: {e}") from e
        except yaml.YAMLError as e:
            raise CacheParseError(f"unable to parse {path} as YAML: {e}") from e
        
        if not isinstance(document, dict):
            raise CacheParseError(f"{path} does not contain a YAML mapping")
        logger.debug(f"Read YAML document from {path}")
        return document
    
    def write(self, path: str, document: Dict[str, Any]) -> None:
        try:
            write_atomically(path, lambda f: yaml.safe_dump(
                document,
                f,
                default_flow_style=False,
                sort_keys=False,
                allow_unicode=True,
            ))
        except (OSError, yaml.YAMLError) as e:
            raise CacheIOError(f"unable to write {path}: {e}") from e
        logger.debug(f"Wrote YAML document to {path}")
