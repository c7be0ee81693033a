"""Persistence backend implementations."""

from shared.implementations.backends.json_backend import JsonBackend
from shared.implementations.backends.yaml_backend import YamlBackend

__all__ = ["JsonBackend", "YamlBackend"]
