import logging
import tomllib
from pathlib import Path
from typing import Any

from baseball_stats.domain.player import Club, Player

logger = logging.getLogger(__name__)

_PLAYER_KEYS = frozenset({"name", "is_pitcher", "era", "hits", "at_bats"})


class RosterError(Exception):
    """Raised when a roster file is missing or malformed."""


# -- Parsing -----------------------------------------------------------------


def _require_field(raw: dict[str, Any], field: str, context: str) -> Any:
    if field not in raw:
        raise RosterError(f"{context}: missing required field '{field}'")
    return raw[field]


def _optional_count(raw: dict[str, Any], field: str, context: str) -> int | None:
    value = raw.get(field)
    if value is None:
        return None
    # bool is an int subclass; reject it explicitly
    if isinstance(value, bool) or not isinstance(value, int):
        raise RosterError(f"{context}: '{field}' must be an integer, got {value!r}")
    if value < 0:
        raise RosterError(f"{context}: '{field}' must be >= 0, got {value}")
    return value


def _optional_str(raw: dict[str, Any], field: str, context: str) -> str | None:
    value = raw.get(field)
    if value is not None and not isinstance(value, str):
        raise RosterError(f"{context}: '{field}' must be a string, got {value!r}")
    return value


def _require_str(raw: dict[str, Any], field: str, context: str) -> str:
    value = _require_field(raw, field, context)
    if not isinstance(value, str):
        raise RosterError(f"{context}: '{field}' must be a string, got {value!r}")
    return value


def parse_player(raw: dict[str, Any]) -> Player:
    name = _require_str(raw, "name", "player")
    context = f"Player '{name}'"

    unknown = sorted(set(raw) - _PLAYER_KEYS)
    if unknown:
        raise RosterError(f"{context}: unrecognized keys {', '.join(unknown)}")

    is_pitcher = raw.get("is_pitcher", False)
    if not isinstance(is_pitcher, bool):
        raise RosterError(f"{context}: 'is_pitcher' must be true or false, got {is_pitcher!r}")

    era = raw.get("era")
    if era is not None and (isinstance(era, bool) or not isinstance(era, (int, float))):
        raise RosterError(f"{context}: 'era' must be a number, got {era!r}")

    return Player(
        name=name,
        is_pitcher=is_pitcher,
        era=float(era) if era is not None else None,
        hits=_optional_count(raw, "hits", context),
        at_bats=_optional_count(raw, "at_bats", context),
    )


def parse_club(raw: dict[str, Any]) -> Club:
    club = raw.get("club")
    if club is None:
        raise RosterError("No [club] section in roster")
    if not isinstance(club, dict):
        raise RosterError(f"'club' must be a table, got {club!r}")

    raw_players = raw.get("players", [])
    if not isinstance(raw_players, list):
        raise RosterError(f"'players' must be an array of tables, got {raw_players!r}")
    for entry in raw_players:
        if not isinstance(entry, dict):
            raise RosterError(f"Each player must be a table, got {entry!r}")

    name = _require_str(club, "name", "club")
    players = tuple(parse_player(p) for p in raw_players)
    return Club(name=name, league=_optional_str(club, "league", "club"), players=players)


# -- TOML loading ------------------------------------------------------------


def load_club(path: Path) -> Club:
    if not path.is_file():
        raise RosterError(f"Roster file not found: {path}")

    with path.open("rb") as f:
        try:
            data = tomllib.load(f)
        except (tomllib.TOMLDecodeError, UnicodeDecodeError) as e:
            raise RosterError(f"Invalid TOML in {path}: {e}") from e

    club = parse_club(data)
    logger.debug("Loaded club %s with %d players from %s", club.name, len(club.players), path)
    return club
