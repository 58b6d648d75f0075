from dataclasses import dataclass

from baseball_stats.domain.counting_stats import CountingStats
from baseball_stats.domain.errors import InvalidArgumentError
from baseball_stats.stats.average import compute_average


@dataclass(frozen=True)
class Player:
    name: str
    is_pitcher: bool = False
    era: float | None = None
    hits: int | None = None
    at_bats: int | None = None

    @property
    def counting_stats(self) -> CountingStats | None:
        if self.hits is None or self.at_bats is None:
            return None
        return CountingStats(hits=self.hits, at_bats=self.at_bats)

    def batting_average(self) -> float:
        stats = self.counting_stats
        if stats is None:
            raise InvalidArgumentError(f"at least one at-bat required: {self.name} has none recorded")
        return compute_average(stats.hits, stats.at_bats)


@dataclass(frozen=True)
class Club:
    name: str
    league: str | None = None
    players: tuple[Player, ...] = ()

    @property
    def counting_stats(self) -> CountingStats:
        """Sum of the players' recorded pairs. Players without a pair are skipped."""
        return CountingStats.total(p.counting_stats for p in self.players if p.counting_stats is not None)

    def batting_average(self) -> float:
        stats = self.counting_stats
        return compute_average(stats.hits, stats.at_bats)
