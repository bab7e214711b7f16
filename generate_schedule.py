#!/usr/bin/env python3
"""
Team Schedule Page Generator

Loads the bundled Schedule.json and teams.json, applies an optional search
query, and writes a static schedule page plus an ICS calendar of the same
games to public/.
"""

from __future__ import annotations

import argparse
import os
import sys
from pathlib import Path

from team_schedule.calendar_gen import create_schedule_calendar
from team_schedule.cards import HOME_TEAM_ID, build_sections, section_header
from team_schedule.html_gen import generate_error_html, generate_index_html
from team_schedule.loader import NO_DATA_MESSAGE, Failed, Loaded, ScheduleStore
from team_schedule.projector import project

DEFAULT_DATA_DIR = os.environ.get("SCHEDULE_DATA_DIR", "data")


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Generate the team schedule page.")
    parser.add_argument("--data-dir", default=DEFAULT_DATA_DIR, help="directory holding Schedule.json and teams.json")
    parser.add_argument("--query", default="", help="search by arena, city, or team code")
    parser.add_argument("--scroll-index", type=int, default=0, help="index of the first visible game")
    parser.add_argument("--home-team-id", default=HOME_TEAM_ID, help="team id treated as the home side")
    parser.add_argument("--output", default="public", help="output directory")
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)
    output_dir = Path(args.output)
    output_dir.mkdir(parents=True, exist_ok=True)
    html_path = output_dir / "index.html"

    print(f"Loading schedule from {args.data_dir}...")
    store = ScheduleStore().load_now(Path(args.data_dir))
    state = store.schedule

    if not isinstance(state, Loaded):
        message = state.message if isinstance(state, Failed) else NO_DATA_MESSAGE
        html_path.write_text(generate_error_html(message), encoding="utf-8")
        print(f"  ERROR: {message}")
        print(f"  Saved {html_path}")
        return 1

    print(f"  Found {len(state.entries)} games, {len(store.teams)} teams")
    if not store.teams:
        print("  Warning: no team branding loaded (logos and colours will use defaults)")

    projection = project(state.entries, args.query, args.scroll_index)
    if args.query:
        print(f"  {len(projection.entries)} games match {args.query!r}")

    sections = build_sections(projection, store.teams, args.home_team_id)
    skipped = len(projection.entries) - sum(len(s.cards) for s in sections)
    if skipped:
        print(f"  Skipped {skipped} game(s) with an unrecognised status")

    html = generate_index_html(sections, section_header(sections, projection.active_header), args.query)
    html_path.write_text(html, encoding="utf-8")
    print(f"  Saved {html_path}")

    cal = create_schedule_calendar(list(projection.entries), home_team_id=args.home_team_id)
    ics_path = output_dir / "schedule.ics"
    ics_path.write_bytes(cal.to_ical())
    print(f"  Saved {ics_path}")

    for section in sections:
        print(f"    {section.label}")
        for card in section.cards:
            print(f"      {card.details.strip(' |')}  {card.visitor_abbreviation} {card.score_line} {card.host_abbreviation}")

    print("\nDone")
    return 0


if __name__ == "__main__":
    sys.exit(main())
