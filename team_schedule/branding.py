"""Team branding lookup against the loaded roster."""

from __future__ import annotations

import re
from typing import Iterable

from team_schedule import Team

DEFAULT_CARD_COLOR = "#444444"

_HEX_COLOR = re.compile(r"^[0-9a-fA-F]{6}$")


def find_team(roster: Iterable[Team], team_id: str) -> Team | None:
    """Return the first roster entry with the given id, or None."""
    for team in roster:
        if team.team_id == team_id:
            return team
    return None


def resolve_visitor_branding(roster: Iterable[Team], team_id: str) -> tuple[str | None, str | None]:
    """Return (logo_url, accent_color) for the visiting side."""
    team = find_team(roster, team_id)
    if team is None:
        return None, None
    return team.logo, team.color


def resolve_host_branding(roster: Iterable[Team], team_id: str) -> str | None:
    """Return the logo URL for the host side."""
    team = find_team(roster, team_id)
    return team.logo if team else None


def card_color(color: str | None) -> str:
    """CSS colour for a card: the team's accent colour or the neutral default."""
    if isinstance(color, str) and color:
        color = color.lstrip("#")
        if _HEX_COLOR.match(color):
            return f"#{color.upper()}"
    return DEFAULT_CARD_COLOR
