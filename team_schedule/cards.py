"""Game status classification and the per-game card view-model."""

from __future__ import annotations

import os
from dataclasses import dataclass
from enum import IntEnum
from typing import Sequence

from team_schedule import ScheduleEntry, Team
from team_schedule.branding import card_color, resolve_host_branding, resolve_visitor_branding
from team_schedule.dates import full_date, game_time, header_date
from team_schedule.projector import Projection

# Miami Heat; override to follow another team
HOME_TEAM_ID = os.environ.get("SCHEDULE_HOME_TEAM_ID", "1610612748")


class GameStatus(IntEnum):
    SCHEDULED = 1
    LIVE = 2
    FINAL = 3


def classify(code: int) -> GameStatus | None:
    """Map a raw status code to a GameStatus, or None if unrecognised."""
    try:
        return GameStatus(code)
    except ValueError:
        return None


@dataclass(frozen=True)
class GameCard:
    """Everything the page needs to draw one game."""

    uid: str
    status: GameStatus
    details: str
    score_line: str
    visitor_abbreviation: str
    host_abbreviation: str
    visitor_logo: str | None
    host_logo: str | None
    color: str
    is_home: bool
    gametime: str

    @property
    def is_live(self) -> bool:
        return self.status == GameStatus.LIVE

    @property
    def show_tickets(self) -> bool:
        return self.status == GameStatus.SCHEDULED


@dataclass(frozen=True)
class CardSection:
    key: str
    label: str
    cards: list[GameCard]


def venue(entry: ScheduleEntry, home_team_id: str = HOME_TEAM_ID) -> tuple[str, str]:
    """Return (separator, label): ("vs", "HOME") for home games, else ("@", "AWAY")."""
    if entry.host.team_id == home_team_id:
        return "vs", "HOME"
    return "@", "AWAY"


def build_card(
    entry: ScheduleEntry,
    roster: Sequence[Team],
    home_team_id: str = HOME_TEAM_ID,
) -> GameCard | None:
    """Build the card for one entry. Entries with an unknown status get None."""
    status = classify(entry.status)
    if status is None:
        return None

    separator, label = venue(entry, home_team_id)
    if status == GameStatus.LIVE:
        details = f" | {game_time(entry.gametime)}"
    else:
        status_text = entry.status_text.replace("ET", "").strip()
        details = f"{label} | {full_date(entry.gametime)} | {status_text}"

    if status == GameStatus.SCHEDULED:
        score_line = separator
    else:
        score_line = f"{entry.visitor.score} {separator} {entry.host.score}"

    visitor_logo, visitor_color = resolve_visitor_branding(roster, entry.visitor.team_id)
    host_logo = resolve_host_branding(roster, entry.host.team_id)

    return GameCard(
        uid=entry.uid,
        status=status,
        details=details,
        score_line=score_line,
        visitor_abbreviation=entry.visitor.abbreviation,
        host_abbreviation=entry.host.abbreviation,
        visitor_logo=visitor_logo,
        host_logo=host_logo,
        color=card_color(visitor_color),
        is_home=label == "HOME",
        gametime=entry.gametime,
    )


def build_sections(
    projection: Projection,
    roster: Sequence[Team],
    home_team_id: str = HOME_TEAM_ID,
) -> list[CardSection]:
    """Turn a projection into labelled card sections, one per game-time group."""
    sections: list[CardSection] = []
    for key, entries in projection.groups.items():
        cards = [c for c in (build_card(e, roster, home_team_id) for e in entries) if c]
        if cards:
            sections.append(CardSection(key=key, label=header_date(key), cards=cards))
    return sections


def section_header(sections: Sequence[CardSection], active_header: str) -> str:
    """Month/year label for the page header.

    The active group may have no rendered section when all of its games have
    an unrecognised status; the label then follows the first rendered section.
    """
    for section in sections:
        if section.key == active_header:
            return section.label
    if sections:
        return sections[0].label
    return header_date(active_header)
