"""Tests for the panchayat-election CLI."""
from __future__ import annotations

import textwrap
from pathlib import Path

import pytest
import yaml
from click.testing import CliRunner

from panchayat_election.cli.main import cli
from panchayat_election.config.loader import ConfigLoader


@pytest.fixture()
def runner() -> CliRunner:
    return CliRunner()


def _write(path: Path, text: str) -> str:
    path.write_text(textwrap.dedent(text), encoding="utf-8")
    return str(path)


# ---------------------------------------------------------------------------
# version / init
# ---------------------------------------------------------------------------


class TestVersionAndInit:
    def test_version_command(self, runner: CliRunner) -> None:
        result = runner.invoke(cli, ["version"])
        assert result.exit_code == 0
        assert "panchayat-election" in result.output

    def test_init_creates_loadable_config(self, runner: CliRunner, tmp_path: Path) -> None:
        output = tmp_path / "conf" / "election.yaml"
        result = runner.invoke(
            cli, ["init", "--name", "Rampur", "--min-age", "21", "--output", str(output)]
        )
        assert result.exit_code == 0
        assert output.exists()

        data = yaml.safe_load(output.read_text(encoding="utf-8"))
        assert data["election_name"] == "Rampur"

        config = ConfigLoader().load(output)
        assert config.registry.min_voter_age == 21
        assert config.validation.min_age == 21


# ---------------------------------------------------------------------------
# validate-voters
# ---------------------------------------------------------------------------


class TestValidateVoters:
    def test_all_eligible_exits_zero(self, runner: CliRunner, tmp_path: Path) -> None:
        roster = _write(
            tmp_path / "roster.yaml",
            """\
            voters:
              - {id: V1, name: Mohan, age: 25}
              - {id: V2, name: Geeta, age: 40}
            """,
        )
        result = runner.invoke(
            cli, ["validate-voters", roster, "--config", str(tmp_path / "none.yaml")]
        )
        assert result.exit_code == 0
        assert "ELIGIBLE" in result.output
        assert "Rejected: 0" in result.output

    def test_rejection_exits_one(self, runner: CliRunner, tmp_path: Path) -> None:
        roster = _write(
            tmp_path / "roster.yaml",
            """\
            - {id: V1, name: Mohan, age: 25}
            - {id: V2, name: Kid, age: 15}
            - {id: V3, age: 30}
            """,
        )
        result = runner.invoke(
            cli, ["validate-voters", roster, "--config", str(tmp_path / "none.yaml")]
        )
        assert result.exit_code == 1
        assert "Min age is 18" in result.output
        assert "name is missing" in result.output
        assert "Rejected: 2" in result.output

    def test_config_rules_applied(self, runner: CliRunner, tmp_path: Path) -> None:
        config = _write(tmp_path / "election.yaml", "validation:\n  min_age: 30\n")
        roster = _write(tmp_path / "roster.yaml", "- {id: V1, name: Mohan, age: 25}\n")
        result = runner.invoke(cli, ["validate-voters", roster, "--config", config])
        assert result.exit_code == 1
        assert "Min age is 30" in result.output

    def test_invalid_config_exits_two(self, runner: CliRunner, tmp_path: Path) -> None:
        config = _write(tmp_path / "election.yaml", "registry:\n  min_voter_age: -1\n")
        roster = _write(tmp_path / "roster.yaml", "- {id: V1, name: Mohan, age: 25}\n")
        result = runner.invoke(cli, ["validate-voters", roster, "--config", config])
        assert result.exit_code == 2
        assert result.exception is None or isinstance(result.exception, SystemExit)
        assert "Invalid config" in result.output
        assert "election.yaml" in result.output.replace("\n", "")

    def test_invalid_roster_yaml_exits_two(self, runner: CliRunner, tmp_path: Path) -> None:
        roster = _write(tmp_path / "roster.yaml", "- {id: [V1, name: Mohan\n")
        result = runner.invoke(
            cli, ["validate-voters", roster, "--config", str(tmp_path / "none.yaml")]
        )
        assert result.exit_code == 2
        assert "Invalid YAML" in result.output

    def test_bracketed_voter_id_printed_literally(self, runner: CliRunner, tmp_path: Path) -> None:
        roster = _write(tmp_path / "roster.yaml", "- {id: '[/ward]', name: Mohan, age: 25}\n")
        result = runner.invoke(
            cli, ["validate-voters", roster, "--config", str(tmp_path / "none.yaml")]
        )
        assert result.exit_code == 0
        assert "[/ward]" in result.output

    def test_roster_not_a_list_exits_two(self, runner: CliRunner, tmp_path: Path) -> None:
        roster = _write(tmp_path / "roster.yaml", "voters: 3\n")
        result = runner.invoke(
            cli, ["validate-voters", roster, "--config", str(tmp_path / "none.yaml")]
        )
        assert result.exit_code == 2


# ---------------------------------------------------------------------------
# count-regions
# ---------------------------------------------------------------------------


class TestCountRegions:
    def test_counts_nested_tree(self, runner: CliRunner, tmp_path: Path) -> None:
        tree = _write(
            tmp_path / "tree.yaml",
            """\
            name: Block
            votes: 5
            subRegions:
              - {name: Ward 1, votes: 3, subRegions: []}
              - name: Ward 2
                votes: 2
                subRegions:
                  - {name: Hamlet, votes: 1}
            """,
        )
        result = runner.invoke(cli, ["count-regions", tree])
        assert result.exit_code == 0
        assert "Block" in result.output
        assert "11" in result.output

    def test_malformed_tree_counts_zero(self, runner: CliRunner, tmp_path: Path) -> None:
        tree = _write(tmp_path / "tree.yaml", "just a string\n")
        result = runner.invoke(cli, ["count-regions", tree])
        assert result.exit_code == 0
        assert ": 0" in result.output

    def test_missing_file_is_usage_error(self, runner: CliRunner, tmp_path: Path) -> None:
        result = runner.invoke(cli, ["count-regions", str(tmp_path / "missing.yaml")])
        assert result.exit_code == 2
