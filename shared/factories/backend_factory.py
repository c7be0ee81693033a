"""Factory for creating persistence backends from a file path."""

from pathlib import Path
from shared.interfaces.persistence_backend import PersistenceBackend
from shared.implementations.backends import JsonBackend, YamlBackend
from shared.domain.consts import BackendExtension


def create_backend(path: str) -> PersistenceBackend:
    """Pick a backend from the file extension.
    
    ``.json`` files use the JSON backend; everything else is treated as YAML.
    
    Returns:
        PersistenceBackend instance
    """
    if Path(path).suffix.lower() in BackendExtension.JSON:
        return JsonBackend()
    return YamlBackend()
