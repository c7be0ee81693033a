"""Domain models for problems and the persisted cache document."""

from typing import Any, Dict, List, Optional
from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator
from shared.domain.consts import AddSolutionStatus, CacheDocument, SolutionFormType
from shared.domain.errors import InvalidStateError


class Problem(BaseModel):
    """
    A single question posed to the user.

    A problem with a non-None ``answer`` is a solution and is the unit stored
    by the solution cache. ``id`` is compared for exact identity; broader
    equivalence is decided by ``matches`` through the matcher registered for
    the problem's form type.
    """
    model_config = ConfigDict(
        populate_by_name=True,
        json_schema_extra={
            "example": {
                "id": "qaengine.services.api.port",
                "type": SolutionFormType.INPUT,
                "description": "Enter the port for the api service",
                "default": "8080",
                "answer": "8080",
            }
        }
    )

    id: str = Field(..., min_length=1, description="Problem identity, may contain * wildcards in stored solutions")
    type: SolutionFormType = Field(..., description="Form type of the problem")
    desc: str = Field("", alias="description", description="Human-readable question")
    hints: List[str] = Field(default_factory=list)
    options: List[str] = Field(default_factory=list)
    default: Optional[Any] = None
    answer: Optional[Any] = None

    def is_resolved(self) -> bool:
        """Check if the problem carries an answer."""
        return self.answer is not None

    def matches(self, other: "Problem") -> bool:
        """Check if this problem and ``other`` denote the same question."""
        # Imported here: the matcher implementations depend on this module
        from shared.factories.matcher_factory import create_matcher
        return create_matcher(self.type).matches(self, other)

    def with_answer(self, answer: Any) -> "Problem":
        """
        Return a copy of this problem resolved with ``answer``.

        Raises:
            InvalidStateError: If the answer does not fit the form type.
        """
        self._validate_answer(answer)
        return self.model_copy(update={"answer": answer})

    def _validate_answer(self, answer: Any) -> None:
        if answer is None:
            raise InvalidStateError(f"problem {self.id} cannot be resolved with an empty answer")
        if self.type == SolutionFormType.CONFIRM:
            if not isinstance(answer, bool):
                raise InvalidStateError(f"problem {self.id} expects a boolean answer, got {answer!r}")
        elif self.type == SolutionFormType.MULTI_SELECT:
            if not isinstance(answer, list) or not all(isinstance(a, str) for a in answer):
                raise InvalidStateError(f"problem {self.id} expects a list of strings, got {answer!r}")
            invalid = [a for a in answer if self.options and a not in self.options]
            if invalid:
                raise InvalidStateError(f"problem {self.id}: {invalid} not among options {self.options}")
        else:
            if not isinstance(answer, str):
                raise InvalidStateError(f"problem {self.id} expects a string answer, got {answer!r}")
            if self.type == SolutionFormType.SELECT and self.options and answer not in self.options:
                raise InvalidStateError(f"problem {self.id}: {answer!r} not among options {self.options}")

    def to_record(self) -> Dict[str, Any]:
        """Serialize using the on-disk field names, dropping empty fields."""
        record = self.model_dump(mode="json", by_alias=True, exclude_none=True)
        for key in ("hints", "options"):
            if not record.get(key):
                record.pop(key, None)
        return record


class ObjectMeta(BaseModel):
    """Name and labels of a persisted document."""
    name: str = ""
    labels: Dict[str, str] = Field(default_factory=dict)

    @field_validator("name", mode="before")
    @classmethod
    def empty_name(cls, value: Any) -> Any:
        """Treat an empty name key as an empty string."""
        return "" if value is None else value

    @field_validator("labels", mode="before")
    @classmethod
    def empty_labels(cls, value: Any) -> Any:
        """Treat an empty labels key as no labels."""
        return {} if value is None else value


class CacheSpec(BaseModel):
    """Ordered solutions held by a cache document."""
    solutions: List[Problem] = Field(default_factory=list)

    @field_validator("solutions", mode="before")
    @classmethod
    def empty_solutions(cls, value: Any) -> Any:
        """Treat an empty solutions key as no solutions."""
        return [] if value is None else value


class QACacheDocument(BaseModel):
    """Self-describing document written to the cache file."""
    model_config = ConfigDict(populate_by_name=True)

    api_version: str = Field(CacheDocument.API_VERSION, alias="apiVersion")
    kind: str = Field(CacheDocument.KIND)
    metadata: ObjectMeta = Field(default_factory=ObjectMeta)
    spec: CacheSpec = Field(default_factory=CacheSpec)

    @field_validator("metadata", "spec", mode="before")
    @classmethod
    def empty_section(cls, value: Any) -> Any:
        """Treat an empty metadata or spec key as an empty section."""
        return {} if value is None else value

    @model_validator(mode='after')
    def validate_kind(self) -> 'QACacheDocument':
        """Validate that the document is a solution cache."""
        if self.kind != CacheDocument.KIND:
            raise ValueError(f"kind ({self.kind}) must be {CacheDocument.KIND}")
        return self

    def to_dict(self) -> Dict[str, Any]:
        """Serialize to plain data for a persistence backend."""
        metadata = self.metadata.model_dump(mode="json")
        if not metadata["labels"]:
            metadata.pop("labels")
        return {
            "apiVersion": self.api_version,
            "kind": self.kind,
            "metadata": metadata,
            "spec": {"solutions": [p.to_record() for p in self.spec.solutions]},
        }


class AddSolutionResult(BaseModel):
    """Result of caching a solution over HTTP."""
    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "status": "CACHED",
                "persisted": True,
                "error_message": None
            }
        }
    )

    status: AddSolutionStatus = Field(..., description="Result status")
    persisted: bool = Field(False, description="Whether the cache file reflects the solution")
    error_message: Optional[str] = Field(None, description="Error message if not persisted")
