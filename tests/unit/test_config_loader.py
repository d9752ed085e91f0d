"""Tests for ConfigLoader and the ElectionConfig schema."""
from __future__ import annotations

import textwrap
from pathlib import Path

import pytest

from panchayat_election.config.loader import (
    ConfigLoader,
    ElectionConfig,
    RegistryConfig,
)
from panchayat_election.errors import ElectionConfigError
from panchayat_election.validation.validator import ValidationRules


# ---------------------------------------------------------------------------
# ConfigLoader — defaults
# ---------------------------------------------------------------------------


class TestConfigLoaderDefaults:
    def test_defaults_returns_election_config(self) -> None:
        config = ConfigLoader().defaults()
        assert isinstance(config, ElectionConfig)

    def test_defaults_min_voter_age(self) -> None:
        assert ConfigLoader().defaults().registry.min_voter_age == 18

    def test_defaults_validation_rules(self) -> None:
        config = ConfigLoader().defaults()
        assert isinstance(config.validation, ValidationRules)
        assert config.validation.required_fields == ["id", "name", "age"]

    def test_defaults_election_name_none(self) -> None:
        assert ConfigLoader().defaults().election_name is None


# ---------------------------------------------------------------------------
# ConfigLoader — strings and files
# ---------------------------------------------------------------------------


class TestConfigLoaderLoad:
    def test_load_string(self) -> None:
        config = ConfigLoader().load_string(
            textwrap.dedent(
                """\
                election_name: Rampur Gram Panchayat 2026
                registry:
                  min_voter_age: 21
                validation:
                  minAge: 21
                  requiredFields: [id, name, age, ward]
                """
            )
        )
        assert config.election_name == "Rampur Gram Panchayat 2026"
        assert config.registry == RegistryConfig(min_voter_age=21)
        assert config.validation.required_fields == ["id", "name", "age", "ward"]

    def test_empty_string_gives_defaults(self) -> None:
        assert ConfigLoader().load_string("") == ElectionConfig()

    def test_unknown_keys_allowed(self) -> None:
        config = ConfigLoader().load_string("future_section:\n  enabled: true\n")
        assert config.model_extra == {"future_section": {"enabled": True}}

    def test_load_file(self, tmp_path: Path) -> None:
        path = tmp_path / "election.yaml"
        path.write_text("registry:\n  min_voter_age: 25\n", encoding="utf-8")
        assert ConfigLoader().load(path).registry.min_voter_age == 25

    def test_missing_file_raises(self, tmp_path: Path) -> None:
        missing = tmp_path / "nope.yaml"
        with pytest.raises(ElectionConfigError) as exc_info:
            ConfigLoader().load(missing)
        assert exc_info.value.config_path == str(missing)
        assert "not found" in str(exc_info.value)

    def test_invalid_value_raises(self) -> None:
        with pytest.raises(ElectionConfigError):
            ConfigLoader().load_string("registry:\n  min_voter_age: -3\n")

    def test_invalid_yaml_raises(self) -> None:
        with pytest.raises(ElectionConfigError, match="Invalid YAML"):
            ConfigLoader().load_string("registry: [unclosed\n")

    def test_non_mapping_top_level_raises(self) -> None:
        with pytest.raises(ElectionConfigError, match="must be a mapping"):
            ConfigLoader().load_string("- a\n- b\n")

    def test_config_error_is_value_error(self) -> None:
        with pytest.raises(ValueError):
            ConfigLoader().load_string("validation:\n  min_age: young\n")

    def test_unknown_validation_key_raises(self) -> None:
        with pytest.raises(ElectionConfigError):
            ConfigLoader().load_string("validation:\n  minage: 21\n")
