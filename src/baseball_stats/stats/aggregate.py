from typing import Protocol, runtime_checkable


@runtime_checkable
class HasBattingAverage(Protocol):
    """Anything with a batting average; implemented by ``Player`` and ``Club``."""

    def batting_average(self) -> float: ...


def aggregate_statistic(entity: HasBattingAverage) -> float:
    """Batting average of a single player or of a whole club.

    A club's average is computed from the summed hits and at-bats of its
    players, not from the mean of their averages.
    """
    return entity.batting_average()
