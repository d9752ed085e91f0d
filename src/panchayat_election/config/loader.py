"""Election configuration loader with Pydantic v2 validation.

Loads and validates an ``election.yaml`` file into a typed
:class:`ElectionConfig` object.  Unknown keys are allowed to support
future schema additions without breakage.

Example
-------
>>> loader = ConfigLoader()
>>> config = loader.load_string("registry:\\n  min_voter_age: 21\\n")
>>> config.registry.min_voter_age
21
"""
from __future__ import annotations

from pathlib import Path

import yaml
from pydantic import BaseModel, Field, ValidationError

from panchayat_election.errors import ElectionConfigError
from panchayat_election.validation.validator import ValidationRules


class RegistryConfig(BaseModel):
    """Configuration for ``ElectionRegistry``."""

    model_config = {"extra": "allow"}

    min_voter_age: int = Field(default=18, ge=0)


class ElectionConfig(BaseModel):
    """Top-level election configuration schema.

    Loaded from ``election.yaml``.  All sections are optional and
    fall back to sensible defaults.
    """

    model_config = {"extra": "allow"}

    version: str = Field(default="1")
    election_name: str | None = Field(default=None)
    registry: RegistryConfig = Field(default_factory=RegistryConfig)
    validation: ValidationRules = Field(default_factory=ValidationRules)


class ConfigLoader:
    """Loads and validates election YAML configuration.

    Example
    -------
    >>> loader = ConfigLoader()
    >>> config = loader.load(Path("election.yaml"))
    """

    def load(self, config_path: Path) -> ElectionConfig:
        """Load and validate an election YAML file.

        Raises
        ------
        ElectionConfigError:
            When the file does not exist or its content fails validation.
        """
        if not config_path.exists():
            raise ElectionConfigError("Election config not found", str(config_path))

        with config_path.open("r", encoding="utf-8") as fh:
            text = fh.read()
        return self._parse(text, str(config_path))

    def load_string(self, yaml_content: str) -> ElectionConfig:
        """Load and validate a YAML string directly."""
        return self._parse(yaml_content, None)

    def defaults(self) -> ElectionConfig:
        """Return a default configuration with all defaults applied."""
        return ElectionConfig()

    def _parse(self, yaml_content: str, source: str | None) -> ElectionConfig:
        try:
            raw = yaml.safe_load(yaml_content) or {}
        except yaml.YAMLError as exc:
            raise ElectionConfigError(f"Invalid YAML: {exc}", source) from exc
        if not isinstance(raw, dict):
            raise ElectionConfigError(
                f"Top-level config must be a mapping, got {type(raw).__name__}", source
            )
        try:
            return ElectionConfig.model_validate(raw)
        except ValidationError as exc:
            raise ElectionConfigError(str(exc), source) from exc
