import logging
from pathlib import Path
from typing import Annotated

import typer

from baseball_stats.cli._logging import configure_logging
from baseball_stats.cli._output import print_average, print_club_report, print_error
from baseball_stats.config import create_config, display_precision, show_pitchers
from baseball_stats.domain.errors import InvalidArgumentError
from baseball_stats.roster import RosterError, load_club
from baseball_stats.services.club_report import build_club_report
from baseball_stats.stats.aggregate import aggregate_statistic
from baseball_stats.stats.average import compute_average

logger = logging.getLogger(__name__)

app = typer.Typer(name="bbstats", help="Baseball statistics: batting averages for players and clubs")


@app.callback(invoke_without_command=True)
def main(
    ctx: typer.Context,
    verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Enable DEBUG logging")] = False,
    config_path: Annotated[
        str, typer.Option("--config", help="YAML settings file (ignored when missing)")
    ] = "baseball_stats.yaml",
) -> None:
    """Baseball statistics: batting averages for players and clubs."""
    configure_logging(verbose=verbose)
    ctx.obj = create_config(yaml_path=config_path)
    if ctx.invoked_subcommand is None:
        raise typer.Exit()


_RosterArg = Annotated[Path, typer.Argument(help="Path to a roster TOML file")]


@app.command()
def average(
    ctx: typer.Context,
    hits: Annotated[int, typer.Argument(help="Number of hits")],
    at_bats: Annotated[int, typer.Argument(help="Number of at-bats")],
) -> None:
    """Compute a batting average from hits and at-bats."""
    try:
        value = compute_average(hits, at_bats)
    except InvalidArgumentError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from None
    print_average("AVG", value, display_precision(ctx.obj))


@app.command()
def club(
    ctx: typer.Context,
    roster: _RosterArg,
    hide_pitchers: Annotated[bool, typer.Option("--hide-pitchers", help="Omit pitcher rows")] = False,
) -> None:
    """Show every player's batting average and the club total."""
    try:
        loaded = load_club(roster)
    except RosterError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from None

    report = build_club_report(loaded)
    show = show_pitchers(ctx.obj) and not hide_pitchers
    print_club_report(report, display_precision(ctx.obj), show_pitchers=show)


@app.command()
def player(
    ctx: typer.Context,
    roster: _RosterArg,
    name: Annotated[str, typer.Argument(help="Player name as written in the roster")],
) -> None:
    """Show a single player's batting average."""
    try:
        loaded = load_club(roster)
    except RosterError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from None

    matches = [p for p in loaded.players if p.name == name]
    if not matches:
        print_error(f"Player '{name}' not found on {loaded.name}")
        raise typer.Exit(code=1)

    found = matches[0]
    try:
        value = aggregate_statistic(found)
    except InvalidArgumentError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from None
    logger.debug("Computed average for %s from %s", found.name, found.counting_stats)
    print_average(found.name, value, display_precision(ctx.obj))
