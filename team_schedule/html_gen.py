"""HTML page generation with schedule tabs, search box, and game cards."""

from __future__ import annotations

from datetime import datetime, timezone
from html import escape

from team_schedule.cards import CardSection, GameCard
from team_schedule.loader import NO_DATA_MESSAGE

LOGO_PLACEHOLDER = "data:image/svg+xml,%3Csvg xmlns='http://www.w3.org/2000/svg' viewBox='0 0 40 40'%3E%3Ccircle cx='20' cy='20' r='18' fill='%23666'/%3E%3C/svg%3E"


def generate_index_html(
    sections: list[CardSection],
    active_header: str,
    query: str = "",
    generated_utc: str | None = None,
) -> str:
    """Generate the schedule page.

    sections come from cards.build_sections(); active_header is the
    already-formatted month/year label shown above the list.
    """
    if generated_utc is None:
        generated_utc = datetime.now(timezone.utc).strftime("%Y-%m-%dT%H:%M:%SZ")

    if sections:
        body = "\n".join(_render_section(s) for s in sections)
    else:
        body = '<div class="empty">No games match your search</div>'

    return _page(
        f"""    <div class="tabs">
        <button class="tab selected" data-tab="schedule">Schedule</button>
        <button class="tab" data-tab="games">Games</button>
    </div>

    <div id="tab-schedule" class="tab-panel">
        <form class="search" method="get">
            <input type="search" name="q" value="{escape(query)}" placeholder="Search by Arena, Team, or City">
        </form>
        <div class="schedule-header" id="schedule-header">{escape(active_header)}</div>
{body}
    </div>

    <div id="tab-games" class="tab-panel" style="display:none">
        <div class="empty">Under development</div>
    </div>""",
        generated_utc,
    )


def generate_error_html(message: str = NO_DATA_MESSAGE, generated_utc: str | None = None) -> str:
    """Full-page message shown when the schedule could not be loaded."""
    if generated_utc is None:
        generated_utc = datetime.now(timezone.utc).strftime("%Y-%m-%dT%H:%M:%SZ")
    return _page(f'    <div class="error">{escape(message)}</div>', generated_utc)


def _render_section(section: CardSection) -> str:
    cards = "\n".join(_render_card(c) for c in section.cards)
    return f"""        <section class="group" data-key="{escape(section.key)}" data-label="{escape(section.label)}">
{cards}
        </section>"""


def _render_card(card: GameCard) -> str:
    live = '<div class="live">LIVE</div>' if card.is_live else ""
    tickets = (
        '<button class="tickets" onclick="underDevelopment()">BUY TICKETS ON ticketmaster</button>'
        if card.show_tickets
        else ""
    )
    return f"""            <article class="card status-{card.status.value}" id="game-{escape(card.uid)}" style="background:{card.color}">
                <div class="details">{escape(card.details)}</div>
                {live}
                <div class="matchup">
                    <div class="side">
                        <img src="{escape(card.visitor_logo or LOGO_PLACEHOLDER)}" alt="Team 1 Icon" width="40" height="40">
                        <span class="abbr">{escape(card.visitor_abbreviation)}</span>
                    </div>
                    <div class="score">{escape(card.score_line)}</div>
                    <div class="side">
                        <img src="{escape(card.host_logo or LOGO_PLACEHOLDER)}" alt="Team 2 Icon" width="40" height="40">
                        <span class="abbr">{escape(card.host_abbreviation)}</span>
                    </div>
                </div>
                {tickets}
            </article>"""


def _page(content: str, generated_utc: str) -> str:
    return f"""<!DOCTYPE html>
<html lang="en">
<head>
    <meta charset="UTF-8">
    <meta name="viewport" content="width=device-width, initial-scale=1.0">
    <title>Team Schedule</title>
    <style>
        * {{ box-sizing: border-box; margin: 0; padding: 0; }}
        body {{
            font-family: -apple-system, BlinkMacSystemFont, 'Segoe UI', Roboto, sans-serif;
            max-width: 600px;
            margin: 0 auto;
            background: #000;
            color: #fff;
            line-height: 1.4;
        }}

        /* Tabs */
        .tabs {{ display: flex; background: #000; border-bottom: 1px solid #222; }}
        .tab {{
            flex: 1;
            padding: 0.9rem;
            background: none;
            border: none;
            color: #fff;
            font-weight: 700;
            font-size: 1rem;
            cursor: pointer;
        }}
        .tab.selected {{ color: #ffeb3b; border-bottom: 2px solid #ffeb3b; }}

        /* Search */
        .search {{ padding: 1rem; }}
        .search input {{
            width: 100%;
            padding: 0.75rem 1rem;
            border-radius: 6px;
            border: none;
            font-size: 1rem;
        }}

        .schedule-header {{
            position: sticky;
            top: 0;
            z-index: 1;
            background: #444;
            padding: 0.6rem;
            font-size: 1.5rem;
        }}

        /* Cards */
        .card {{
            border-radius: 10px;
            padding: 1rem;
            margin: 0.5rem 0;
            text-align: center;
        }}
        .details {{ font-size: 0.875rem; }}
        .live {{ font-size: 0.75rem; font-weight: 700; }}
        .matchup {{
            display: flex;
            align-items: center;
            justify-content: center;
            gap: 1.25rem;
            margin-top: 0.6rem;
        }}
        .side {{ display: flex; flex-direction: column; align-items: center; }}
        .abbr, .score {{ font-size: 1.25rem; font-weight: 700; }}
        .tickets {{
            width: 100%;
            margin-top: 0.6rem;
            padding: 0.6rem;
            border: none;
            border-radius: 20px;
            background: #fff;
            color: #000;
            cursor: pointer;
        }}

        .empty {{ color: #888; font-style: italic; padding: 1.5rem; text-align: center; }}
        .error {{
            display: flex;
            align-items: center;
            justify-content: center;
            min-height: 100vh;
        }}
        .footer {{
            margin: 2rem 1rem 1rem;
            padding-top: 1rem;
            border-top: 1px solid #222;
            color: #666;
            font-size: 0.8rem;
        }}
    </style>
</head>
<body>
{content}

    <div class="footer">
        <p>Last updated: <span id="last-updated">{generated_utc}</span></p>
    </div>

    <script>
    function underDevelopment() {{
        alert('Under development');
    }}

    // Tabs
    for (const tab of document.querySelectorAll('.tab')) {{
        tab.onclick = () => {{
            for (const t of document.querySelectorAll('.tab')) {{
                t.classList.toggle('selected', t === tab);
                document.getElementById('tab-' + t.dataset.tab).style.display = t === tab ? '' : 'none';
            }}
        }};
    }}

    // Sticky header follows the first visible group
    const header = document.getElementById('schedule-header');
    const groups = document.querySelectorAll('.group');
    if (header && groups.length && 'IntersectionObserver' in window) {{
        const observer = new IntersectionObserver((entries) => {{
            const visible = entries.filter(e => e.isIntersecting);
            if (visible.length) {{
                header.textContent = visible[0].target.dataset.label;
            }}
        }}, {{ rootMargin: '-60px 0px -80% 0px' }});
        groups.forEach(g => observer.observe(g));
    }}
    </script>
</body>
</html>"""
