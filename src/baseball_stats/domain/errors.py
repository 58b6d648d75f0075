from dataclasses import dataclass


class InvalidArgumentError(ValueError):
    """Raised when a statistic is requested from counts that cannot produce one."""


@dataclass(frozen=True)
class BaseballStatsError:
    message: str


@dataclass(frozen=True)
class StatError(BaseballStatsError):
    subject: str
