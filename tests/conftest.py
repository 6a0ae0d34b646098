"""Shared test fixtures for the headingid test suite."""

from __future__ import annotations

import pytest
from markdown_it import MarkdownIt

from headingid.config import FilterSettings, Settings
from headingid.events import build_markdown, parse_events
from headingid.filter import HeadingId
from headingid.html import render_html


@pytest.fixture()
def md() -> MarkdownIt:
    return build_markdown()


@pytest.fixture()
def convert(md: MarkdownIt):
    """Render Markdown through a single HeadingId filter."""

    def _convert(text: str, settings: Settings | None = None) -> str:
        return render_html(HeadingId(parse_events(text, md), settings=settings, md=md), md)

    return _convert


@pytest.fixture()
def settings_for():
    """Build Settings with a given unterminated-heading policy."""

    def _settings(policy: str) -> Settings:
        return Settings(filter=FilterSettings(unterminated_heading=policy))

    return _settings
