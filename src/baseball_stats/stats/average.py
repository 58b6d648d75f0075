"""Batting average computation."""

from baseball_stats.domain.errors import InvalidArgumentError


def compute_average(hits: int, at_bats: int) -> float:
    """Return ``hits / at_bats`` as a float, unrounded.

    Raises InvalidArgumentError when ``at_bats`` is less than one.
    """
    if at_bats < 1:
        raise InvalidArgumentError("at least one at-bat required")
    return hits / at_bats
