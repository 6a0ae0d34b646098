"""HTML rendering of flat event streams, plus the escaping helpers."""

from __future__ import annotations

from typing import TYPE_CHECKING

import mdurl
from markdown_it import MarkdownIt
from markdown_it.common.utils import escapeHtml
from markdown_it.token import Token

if TYPE_CHECKING:
    from collections.abc import Iterable


def _regroup(events: Iterable[Token]) -> list[Token]:
    """Put runs of inline tokens back under an ``inline`` container.

    RendererHTML decides block newlines by peeking at the neighbouring token,
    so a flattened ``paragraph_open, text, paragraph_close`` would render as
    ``<p>\\ntext</p>`` without this.
    """
    tokens: list[Token] = []
    run: list[Token] = []
    for event in events:
        if event.block:
            if run:
                tokens.append(Token("inline", "", 0, children=run))
                run = []
            tokens.append(event)
        else:
            run.append(event)
    if run:
        tokens.append(Token("inline", "", 0, children=run))
    return tokens


def render_html(events: Iterable[Token], md: MarkdownIt | None = None) -> str:
    """Render a flat event sequence with markdown-it's HTML renderer."""
    md = md or MarkdownIt("commonmark")
    return md.renderer.render(_regroup(events), md.options, {})


def escape_html(text: str) -> str:
    """Entity-encode ``& < > "`` for text content."""
    return escapeHtml(text)


def escape_href(value: str) -> str:
    """Escape a value for a quoted attribute the way link targets are.

    Unsafe characters are percent-encoded (space becomes ``%20``), existing
    ``%XX`` escapes are kept, and the result is entity-encoded.
    """
    return escapeHtml(mdurl.encode(value))
