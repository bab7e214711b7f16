"""Search filtering, grouping by game time, and sticky-header tracking."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Sequence

from team_schedule import ScheduleEntry
from team_schedule.dates import current_timestamp


@dataclass(frozen=True)
class Projection:
    """What the schedule list shows for one (query, scroll position) pair."""

    entries: tuple[ScheduleEntry, ...]
    groups: dict[str, list[ScheduleEntry]]
    active_header: str


def matches_query(entry: ScheduleEntry, query: str) -> bool:
    """Case-insensitive substring match on arena, city, and both team codes."""
    needle = query.casefold()
    return any(
        needle in field.casefold()
        for field in (entry.arena_name, entry.arena_city, entry.visitor.code, entry.host.code)
    )


def filter_entries(entries: Sequence[ScheduleEntry], query: str) -> tuple[ScheduleEntry, ...]:
    """Keep entries matching the query. An empty query keeps everything."""
    if not query:
        return tuple(entries)
    return tuple(e for e in entries if matches_query(e, query))


def group_by_gametime(entries: Sequence[ScheduleEntry]) -> dict[str, list[ScheduleEntry]]:
    """Group entries by their raw gametime string, in first-occurrence order."""
    groups: dict[str, list[ScheduleEntry]] = {}
    for entry in entries:
        groups.setdefault(entry.gametime, []).append(entry)
    return groups


def find_active_header(
    groups: dict[str, list[ScheduleEntry]],
    entries: Sequence[ScheduleEntry],
    index: int,
) -> str | None:
    """Return the group key holding the entry at `index`, matched by uid."""
    if index < 0 or index >= len(entries):
        return None
    uid = entries[index].uid
    for key, group in groups.items():
        if any(e.uid == uid for e in group):
            return key
    return None


def project(
    entries: Sequence[ScheduleEntry],
    query: str = "",
    scroll_index: int = 0,
    previous_header: str | None = None,
    now: datetime | None = None,
) -> Projection:
    """Recompute filter, groups and active header from scratch.

    Call again whenever the query, the scroll position, or the loaded
    entries change. The active header falls back to the previous header
    only while that group still exists, then to the first group, then to
    the current instant when nothing matched.
    """
    filtered = filter_entries(entries, query)
    groups = group_by_gametime(filtered)

    header = find_active_header(groups, filtered, scroll_index)
    if header is None:
        if previous_header is not None and previous_header in groups:
            header = previous_header
        elif groups:
            header = next(iter(groups))
        else:
            header = current_timestamp(now)

    return Projection(entries=filtered, groups=groups, active_header=header)
