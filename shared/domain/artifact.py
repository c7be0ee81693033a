"""Artifact passed between pipeline stages."""

import logging
from typing import Any, Dict, List, Type, TypeVar
from pydantic import BaseModel, ConfigDict, Field, ValidationError
from shared.domain.errors import ConfigNotFoundError

logger = logging.getLogger(__name__)

ConfigModel = TypeVar("ConfigModel", bound=BaseModel)


class LabelSelectorRequirement(BaseModel):
    """Single label match expression."""
    key: str
    operator: str
    values: List[str] = Field(default_factory=list)


class LabelSelector(BaseModel):
    """Selects the stages that should process an artifact; empty selects all."""
    model_config = ConfigDict(populate_by_name=True)

    match_labels: Dict[str, str] = Field(default_factory=dict, alias="matchLabels")
    match_expressions: List[LabelSelectorRequirement] = Field(default_factory=list, alias="matchExpressions")


class Artifact(BaseModel):
    """
    Data carrier between pipeline stages.

    ``paths`` maps a path type to file paths; ``configs`` maps a config name to
    a raw value (e.g. loaded from YAML) that is validated on demand.
    """
    model_config = ConfigDict(populate_by_name=True)

    name: str = ""
    type: str = ""
    process_with: LabelSelector = Field(default_factory=LabelSelector, alias="processWith")
    paths: Dict[str, List[str]] = Field(default_factory=dict)
    configs: Dict[str, Any] = Field(default_factory=dict)

    def get_config(self, config_name: str, model: Type[ConfigModel]) -> ConfigModel:
        """
        Load the named config into ``model``.

        Raises:
            ConfigNotFoundError: If the artifact has no such config.
            ValidationError: If the raw config does not fit ``model``.
        """
        try:
            raw_config = self.configs[config_name]
        except KeyError:
            raise ConfigNotFoundError(
                f"unable to find {config_name} config in artifact {self.name!r}. Ignoring"
            )
        try:
            return model.model_validate(raw_config)
        except ValidationError as e:
            logger.error(f"unable to load config {config_name} into {model.__name__}: {e}")
            raise
