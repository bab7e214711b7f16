"""Loading of the bundled schedule and team documents.

Both documents are read once. The schedule is the only one that can fail
the view: a broken team roster just means games render without branding.
"""

from __future__ import annotations

import json
import threading
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Callable, Union

from team_schedule import ScheduleEntry, Team, TeamSide

SCHEDULE_FILE = "Schedule.json"
TEAMS_FILE = "teams.json"
NO_DATA_MESSAGE = "No data found"

_ENTRY_KEYS = {"uid", "gametime", "st", "stt", "arena_name", "arena_city", "v", "h"}
_TEAM_KEYS = {"tid", "logo", "color", "ta", "tn"}


class DataFormatError(ValueError):
    """Raised when a bundled document does not have the expected shape."""


@dataclass(frozen=True)
class Loading:
    pass


@dataclass(frozen=True)
class Loaded:
    entries: tuple[ScheduleEntry, ...]


@dataclass(frozen=True)
class Failed:
    message: str


LoadState = Union[Loading, Loaded, Failed]


@dataclass(frozen=True)
class LoadResult:
    schedule: LoadState
    teams: tuple[Team, ...]


def load_schedule(path: Path) -> tuple[ScheduleEntry, ...]:
    """Read Schedule.json and return its entries in source order."""
    data = _read_json(path)
    try:
        raw_entries = data["data"]["schedules"]
    except (KeyError, TypeError) as e:
        raise DataFormatError(f"{path.name}: missing data.schedules") from e
    if not isinstance(raw_entries, list):
        raise DataFormatError(f"{path.name}: data.schedules is not a list")
    return tuple(parse_entry(raw) for raw in raw_entries)


def load_teams(path: Path) -> tuple[Team, ...]:
    """Read teams.json and return the roster in source order."""
    data = _read_json(path)
    try:
        raw_teams = data["data"]["teams"]
    except (KeyError, TypeError) as e:
        raise DataFormatError(f"{path.name}: missing data.teams") from e
    if not isinstance(raw_teams, list):
        raise DataFormatError(f"{path.name}: data.teams is not a list")
    return tuple(parse_team(raw) for raw in raw_teams)


def parse_entry(raw: dict) -> ScheduleEntry:
    """Convert one raw schedule record into a ScheduleEntry."""
    if not isinstance(raw, dict):
        raise DataFormatError(f"schedule entry is not an object: {raw!r}")
    try:
        return ScheduleEntry(
            uid=str(raw["uid"]),
            gametime=str(raw["gametime"]),
            status=int(raw["st"]),
            status_text=str(raw.get("stt") or ""),
            arena_name=str(raw.get("arena_name") or ""),
            arena_city=str(raw.get("arena_city") or ""),
            visitor=parse_side(raw["v"]),
            host=parse_side(raw["h"]),
            extra={k: v for k, v in raw.items() if k not in _ENTRY_KEYS},
        )
    except DataFormatError:
        raise
    except KeyError as e:
        raise DataFormatError(f"schedule entry missing field {e}") from e
    except (TypeError, ValueError) as e:
        raise DataFormatError(f"schedule entry {raw.get('uid')!r}: {e}") from e


def parse_side(raw: dict) -> TeamSide:
    """Convert a visitor/host record into a TeamSide."""
    if not isinstance(raw, dict):
        raise DataFormatError(f"team side is not an object: {raw!r}")
    return TeamSide(
        team_id=str(raw["tid"]),
        code=str(raw.get("tc") or ""),
        abbreviation=str(raw.get("ta") or ""),
        name=str(raw.get("tn") or ""),
        score=_parse_score(raw.get("s")),
    )


def parse_team(raw: dict) -> Team:
    """Convert one roster record into a Team. Unused keys are kept in extra."""
    if not isinstance(raw, dict):
        raise DataFormatError(f"team entry is not an object: {raw!r}")
    try:
        team_id = str(raw["tid"])
    except KeyError as e:
        raise DataFormatError("team entry missing field 'tid'") from e
    return Team(
        team_id=team_id,
        logo=_optional_text(raw.get("logo")),
        color=_optional_text(raw.get("color")),
        abbreviation=str(raw.get("ta") or ""),
        name=str(raw.get("tn") or ""),
        extra={k: v for k, v in raw.items() if k not in _TEAM_KEYS},
    )


def _optional_text(value: Any) -> str | None:
    # Branding fields of the wrong type are dropped, not fatal
    if isinstance(value, str) and value:
        return value
    return None


def _parse_score(value: Any) -> int:
    # Scores arrive as ints or strings, and as "" before tip-off
    if value is None or value == "":
        return 0
    try:
        return int(value)
    except (TypeError, ValueError):
        return 0


def _read_json(path: Path) -> Any:
    with open(path, encoding="utf-8") as f:
        return json.load(f)


def load(data_dir: Path) -> LoadResult:
    """Load both documents, isolating failures per document.

    A schedule failure yields Failed("No data found"); the team roster is
    still attempted. A roster failure yields an empty roster.
    """
    schedule: LoadState
    try:
        entries = load_schedule(data_dir / SCHEDULE_FILE)
        # Most recently listed game first
        schedule = Loaded(entries=tuple(reversed(entries)))
    except (OSError, ValueError) as e:
        print(f"  ERROR: Failed to load {SCHEDULE_FILE}: {e}")
        schedule = Failed(message=NO_DATA_MESSAGE)

    try:
        teams = load_teams(data_dir / TEAMS_FILE)
    except (OSError, ValueError) as e:
        print(f"  ERROR: Failed to load {TEAMS_FILE}: {e}")
        teams = ()

    return LoadResult(schedule=schedule, teams=teams)


class ScheduleStore:
    """Process-wide holder of the loaded documents.

    The background loader is the only writer and publishes each document
    once. Readers see whole values; subscribers are called after every
    publish with the store.
    """

    def __init__(self) -> None:
        self._schedule: LoadState = Loading()
        self._teams: tuple[Team, ...] = ()
        self._subscribers: list[Callable[[ScheduleStore], None]] = []
        self._lock = threading.Lock()
        self._thread: threading.Thread | None = None

    @property
    def schedule(self) -> LoadState:
        return self._schedule

    @property
    def teams(self) -> tuple[Team, ...]:
        return self._teams

    def subscribe(self, callback: Callable[[ScheduleStore], None]) -> Callable[[], None]:
        """Register a callback; returns a function that removes it."""
        with self._lock:
            self._subscribers.append(callback)

        def unsubscribe() -> None:
            with self._lock:
                if callback in self._subscribers:
                    self._subscribers.remove(callback)

        return unsubscribe

    def start(self, data_dir: Path) -> threading.Thread:
        """Start the one-time background load. Later calls return the same thread."""
        with self._lock:
            if self._thread is None:
                self._thread = threading.Thread(
                    target=self._run, args=(data_dir,), name="schedule-loader", daemon=True
                )
                self._thread.start()
            return self._thread

    def load_now(self, data_dir: Path) -> ScheduleStore:
        """Start the load if needed and block until both documents are published."""
        self.start(data_dir).join()
        return self

    def _run(self, data_dir: Path) -> None:
        result = load(data_dir)
        self._publish_schedule(result.schedule)
        self._publish_teams(result.teams)

    def _publish_schedule(self, state: LoadState) -> None:
        self._schedule = state
        self._notify()

    def _publish_teams(self, teams: tuple[Team, ...]) -> None:
        self._teams = teams
        self._notify()

    def _notify(self) -> None:
        with self._lock:
            subscribers = list(self._subscribers)
        for callback in subscribers:
            callback(self)
