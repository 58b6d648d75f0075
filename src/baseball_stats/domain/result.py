"""Ok/Err values for expected failures.

Used where a missing statistic is an ordinary outcome rather than a bug,
e.g. a club report row for a player with no at-bats carries
``Err(StatError(...))`` instead of raising.
"""

from dataclasses import dataclass
from typing import Generic, TypeAlias, TypeVar

T = TypeVar("T")
E = TypeVar("E")


@dataclass(frozen=True, slots=True)
class Ok(Generic[T]):
    value: T


@dataclass(frozen=True, slots=True)
class Err(Generic[E]):
    error: E


Result: TypeAlias = Ok[T] | Err[E]
