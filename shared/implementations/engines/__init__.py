"""Question engine implementations."""

from shared.implementations.engines.default_engine import DefaultEngine

__all__ = ["DefaultEngine"]
