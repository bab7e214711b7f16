"""ICS calendar export of the projected schedule."""

from __future__ import annotations

from datetime import timedelta

from icalendar import Alarm, Calendar, Event

from team_schedule import ScheduleEntry
from team_schedule.cards import HOME_TEAM_ID, GameStatus, classify, venue
from team_schedule.dates import parse_gametime


def create_schedule_calendar(
    entries: list[ScheduleEntry],
    name: str = "Team Schedule",
    home_team_id: str = HOME_TEAM_ID,
) -> Calendar:
    """Create an ICS calendar with one event per recognised game.

    Entries with an unknown status or an unparseable game time are skipped.
    """
    cal = Calendar()
    cal.add("prodid", f"-//{name}//team-schedule//")
    cal.add("version", "2.0")
    cal.add("calscale", "GREGORIAN")
    cal.add("method", "PUBLISH")
    cal.add("x-wr-calname", name)
    cal.add("x-wr-timezone", "Asia/Kolkata")

    for entry in entries:
        event = _create_event(entry, home_team_id)
        if event is not None:
            cal.add_component(event)

    return cal


def _create_event(entry: ScheduleEntry, home_team_id: str) -> Event | None:
    """Create a calendar event from a schedule entry."""
    status = classify(entry.status)
    dt = parse_gametime(entry.gametime)
    if status is None or dt is None:
        return None

    separator, label = venue(entry, home_team_id)
    event = Event()
    event.add("summary", f"{entry.visitor.abbreviation} {separator} {entry.host.abbreviation}")
    event.add("dtstart", dt)
    event.add("dtend", dt + timedelta(hours=2, minutes=30))

    location = ", ".join(p for p in (entry.arena_name, entry.arena_city) if p)
    if location:
        event.add("location", location)

    description = f"{label} game: {entry.visitor.name} at {entry.host.name}"
    if status == GameStatus.FINAL:
        description += f"\n\nFinal: {entry.visitor.score} - {entry.host.score}"
    event.add("description", description)

    event.add("uid", f"{entry.uid}@team-schedule")

    # Only upcoming games get a reminder
    if status == GameStatus.SCHEDULED:
        alarm = Alarm()
        alarm.add("action", "DISPLAY")
        alarm.add("description", f"{entry.visitor.abbreviation} {separator} {entry.host.abbreviation} starts in 30 minutes!")
        alarm.add("trigger", timedelta(minutes=-30))
        event.add_component(alarm)

    event.add("status", "CONFIRMED")
    if status != GameStatus.SCHEDULED:
        event.add("transp", "TRANSPARENT")

    return event
