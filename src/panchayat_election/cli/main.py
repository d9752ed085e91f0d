"""CLI entry point for panchayat-election.

Invoked as::

    panchayat-election [OPTIONS] COMMAND [ARGS]...

or during development::

    python -m panchayat_election.cli.main

Commands
--------
- init             Write a default election.yaml
- validate-voters  Check a voter roster YAML against the validation rules
- count-regions    Total the votes of a region tree YAML
- version          Show version information
"""
from __future__ import annotations

import logging
import sys
from pathlib import Path

import click
import yaml
from rich import box
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from panchayat_election.config.loader import ConfigLoader, ElectionConfig
from panchayat_election.errors import ElectionConfigError

console = Console()
err_console = Console(stderr=True)

_DEFAULT_CONFIG = Path("election.yaml")


def _load_config(config_path: str) -> ElectionConfig:
    loader = ConfigLoader()
    cfg_path = Path(config_path)
    if not cfg_path.exists():
        return loader.defaults()
    try:
        return loader.load(cfg_path)
    except ElectionConfigError as exc:
        err_console.print(f"[red]Invalid config:[/red] {escape(str(exc))}")
        sys.exit(2)


def _load_yaml_file(path: str) -> object:
    try:
        with Path(path).open("r", encoding="utf-8") as fh:
            return yaml.safe_load(fh)
    except yaml.YAMLError as exc:
        err_console.print(f"[red]Invalid YAML:[/red] {escape(str(exc))}")
        sys.exit(2)


# ---------------------------------------------------------------------------
# Root command group
# ---------------------------------------------------------------------------


@click.group()
@click.version_option(package_name="panchayat-election")
@click.option(
    "--log-level",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"], case_sensitive=False),
    default="WARNING",
    show_default=True,
    help="Logging level for library messages.",
)
def cli(log_level: str) -> None:
    """Panchayat election CLI — config, roster and region tooling."""
    logging.basicConfig(
        level=log_level.upper(),
        format="%(name)s: %(message)s",
        handlers=[RichHandler(console=err_console, show_time=False, show_path=False)],
    )


# ---------------------------------------------------------------------------
# version
# ---------------------------------------------------------------------------


@cli.command(name="version")
def version_command() -> None:
    """Show detailed version information."""
    from panchayat_election import __version__

    console.print(
        Panel(
            f"[bold]panchayat-election[/bold]  v[cyan]{__version__}[/cyan]\n"
            "In-memory election registry for village panchayat polls.",
            title="Version",
            border_style="blue",
        )
    )


# ---------------------------------------------------------------------------
# init
# ---------------------------------------------------------------------------


@cli.command(name="init")
@click.option("--name", "election_name", default=None, help="Election name to record in the config.")
@click.option("--min-age", default=18, show_default=True, type=int, help="Minimum voter age.")
@click.option(
    "--output",
    "-o",
    type=click.Path(),
    default=str(_DEFAULT_CONFIG),
    show_default=True,
    help="Output election config file path.",
)
def init_command(election_name: str | None, min_age: int, output: str) -> None:
    """Write a default election config."""
    output_path = Path(output)
    config = ElectionConfig(
        election_name=election_name,
        registry={"min_voter_age": min_age},
        validation={"min_age": min_age},
    )

    output_path.parent.mkdir(parents=True, exist_ok=True)
    with output_path.open("w", encoding="utf-8") as fh:
        yaml.dump(
            config.model_dump(mode="json"),
            fh,
            default_flow_style=False,
            sort_keys=False,
            allow_unicode=True,
        )

    console.print(f"[green]Initialised[/green] election config: [bold]{escape(str(output_path))}[/bold]")
    console.print(f"  Minimum voter age: [cyan]{min_age}[/cyan]")


# ---------------------------------------------------------------------------
# validate-voters
# ---------------------------------------------------------------------------


@cli.command(name="validate-voters")
@click.argument("roster_file", type=click.Path(exists=True, dir_okay=False))
@click.option(
    "--config",
    "-c",
    "config_path",
    default=str(_DEFAULT_CONFIG),
    type=click.Path(),
    help="Path to election.yaml.",
)
def validate_voters_command(roster_file: str, config_path: str) -> None:
    """Check every voter in ROSTER_FILE against the validation rules.

    ROSTER_FILE is a YAML list of voters, or a mapping with a ``voters`` list.
    Exits 1 when any voter is rejected.
    """
    from panchayat_election.validation.validator import create_vote_validator

    config = _load_config(config_path)
    raw = _load_yaml_file(roster_file)
    voters = raw.get("voters", []) if isinstance(raw, dict) else raw
    if not isinstance(voters, list):
        err_console.print("[red]Roster must be a list of voters.[/red]")
        sys.exit(2)

    validate = create_vote_validator(config.validation)

    table = Table(title="Voter Eligibility", box=box.SIMPLE)
    table.add_column("Voter", style="cyan")
    table.add_column("Status")
    table.add_column("Reason")

    rejected = 0
    for entry in voters:
        decision = validate(entry)
        voter_id = str(entry.get("id", "?")) if isinstance(entry, dict) else "?"
        if decision.valid:
            status = "[green]ELIGIBLE[/green]"
        else:
            status = "[red]REJECTED[/red]"
            rejected += 1
        table.add_row(escape(voter_id), status, escape(decision.reason))

    console.print(table)
    console.print(f"  Checked: [cyan]{len(voters)}[/cyan]  Rejected: [cyan]{rejected}[/cyan]")
    sys.exit(1 if rejected else 0)


# ---------------------------------------------------------------------------
# count-regions
# ---------------------------------------------------------------------------


@cli.command(name="count-regions")
@click.argument("tree_file", type=click.Path(exists=True, dir_okay=False))
def count_regions_command(tree_file: str) -> None:
    """Print the total votes in the region tree stored in TREE_FILE."""
    from panchayat_election.regions.tally import count_votes_in_regions

    tree = _load_yaml_file(tree_file)
    total = count_votes_in_regions(tree)
    fallback = Path(tree_file).name
    name = tree.get("name", fallback) if isinstance(tree, dict) else fallback
    console.print(f"Total votes in [bold]{escape(str(name))}[/bold]: [cyan]{total}[/cyan]")


if __name__ == "__main__":
    cli()
