import logging
from dataclasses import dataclass

from baseball_stats.domain.errors import InvalidArgumentError, StatError
from baseball_stats.domain.player import Club
from baseball_stats.domain.result import Err, Ok, Result
from baseball_stats.stats.aggregate import HasBattingAverage, aggregate_statistic

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ReportRow:
    name: str
    is_pitcher: bool
    hits: int | None
    at_bats: int | None
    average: Result[float, StatError]


@dataclass(frozen=True)
class ClubReport:
    club_name: str
    rows: list[ReportRow]
    total: Result[float, StatError]


def try_average(entity: HasBattingAverage, subject: str) -> Result[float, StatError]:
    try:
        return Ok(aggregate_statistic(entity))
    except InvalidArgumentError as e:
        logger.debug("No batting average for %s: %s", subject, e)
        return Err(StatError(message=str(e), subject=subject))


def build_club_report(club: Club) -> ClubReport:
    """Per-player averages in roster order plus the club-wide average."""
    rows = [
        ReportRow(
            name=player.name,
            is_pitcher=player.is_pitcher,
            hits=player.hits,
            at_bats=player.at_bats,
            average=try_average(player, player.name),
        )
        for player in club.players
    ]
    return ClubReport(club_name=club.name, rows=rows, total=try_average(club, club.name))
