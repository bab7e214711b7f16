"""Team Schedule — shared data models."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True)
class TeamSide:
    """One participant of a game (visitor or host)."""

    team_id: str
    code: str
    abbreviation: str
    name: str
    score: int = 0


@dataclass(frozen=True)
class ScheduleEntry:
    """A single scheduled game."""

    uid: str
    gametime: str
    status: int
    status_text: str
    arena_name: str
    arena_city: str
    visitor: TeamSide
    host: TeamSide
    extra: dict[str, Any] = field(default_factory=dict, compare=False, hash=False)


@dataclass(frozen=True)
class Team:
    """A roster entry carrying a team's branding."""

    team_id: str
    logo: str | None
    color: str | None
    abbreviation: str
    name: str
    extra: dict[str, Any] = field(default_factory=dict, compare=False, hash=False)
