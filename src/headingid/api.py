"""One-call Markdown to HTML conversion with heading ids."""

from __future__ import annotations

from headingid.config import Settings, load_settings
from headingid.events import build_markdown, parse_events
from headingid.filter import HeadingId
from headingid.html import render_html


def markdown_to_html(text: str, settings: Settings | None = None) -> str:
    """Render *text* to HTML, turning ``## Title {#id}`` into ``<h2 id="id">``."""
    settings = settings or load_settings()
    md = build_markdown(settings)
    events = HeadingId(parse_events(text, md), settings=settings, md=md)
    return render_html(events, md)
