"""QA engine business logic services."""

from qaengine.services.qa_service import QAService

__all__ = [
    "QAService",
]
