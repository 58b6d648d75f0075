from collections.abc import Iterable
from dataclasses import dataclass


@dataclass(frozen=True)
class CountingStats:
    hits: int
    at_bats: int

    def __add__(self, other: "CountingStats") -> "CountingStats":
        return CountingStats(hits=self.hits + other.hits, at_bats=self.at_bats + other.at_bats)

    @classmethod
    def total(cls, pairs: Iterable["CountingStats"]) -> "CountingStats":
        """Sum pairs component-wise; an empty iterable sums to zero."""
        result = cls(hits=0, at_bats=0)
        for pair in pairs:
            result = result + pair
        return result
