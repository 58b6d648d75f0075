from rich.console import Console
from rich.table import Table

from baseball_stats.domain.errors import StatError
from baseball_stats.domain.result import Ok, Result
from baseball_stats.services.club_report import ClubReport

console = Console(highlight=False)
err_console = Console(stderr=True, highlight=False)

_MISSING = "-"


def print_error(message: str) -> None:
    err_console.print(f"[red bold]Error:[/red bold] {message}")


def format_average(value: float, precision: int) -> str:
    return f"{value:.{precision}f}"


def _format_result(result: Result[float, StatError], precision: int) -> str:
    if isinstance(result, Ok):
        return format_average(result.value, precision)
    return _MISSING


def _format_count(value: int | None) -> str:
    return _MISSING if value is None else str(value)


def print_average(label: str, value: float, precision: int) -> None:
    console.print(f"[bold]{label}[/bold]: {format_average(value, precision)}")


def print_club_report(report: ClubReport, precision: int, *, show_pitchers: bool = True) -> None:
    console.print(f"Batting averages: [bold]{report.club_name}[/bold]")
    table = Table(show_edge=False, pad_edge=False)
    table.add_column("Player")
    table.add_column("Role")
    table.add_column("H", justify="right")
    table.add_column("AB", justify="right")
    table.add_column("AVG", justify="right")
    for row in report.rows:
        if row.is_pitcher and not show_pitchers:
            continue
        table.add_row(
            row.name,
            "P" if row.is_pitcher else "",
            _format_count(row.hits),
            _format_count(row.at_bats),
            _format_result(row.average, precision),
        )
    console.print(table)
    console.print(f"[bold]Club total[/bold]: {_format_result(report.total, precision)}")
