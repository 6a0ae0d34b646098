"""Flat event stream over markdown-it-py tokens.

markdown-it nests inline tokens under an ``inline`` container. The heading
filter wants a single sequence in document order, so ``parse_events`` splices
each container's children in its place. ``render_html`` in
:mod:`headingid.html` regroups them before rendering.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from markdown_it import MarkdownIt
from markdown_it.token import Token

if TYPE_CHECKING:
    from collections.abc import Iterator

    from headingid.config import Settings


def build_markdown(settings: Settings | None = None) -> MarkdownIt:
    """Return a MarkdownIt parser configured from ``settings.markdown``.

    ``text_join`` is switched off so a backslash escape or an entity stays a
    token of its own. ``\\{#x}`` then never looks like a trailing marker.
    """
    if settings is None:
        md = MarkdownIt("commonmark")
    else:
        options: dict = {}
        if settings.markdown.html is not None:
            options["html"] = settings.markdown.html
        md = MarkdownIt(settings.markdown.preset, options_update=options)
    return md.disable("text_join", ignoreInvalid=True)


def parse_events(text: str, md: MarkdownIt | None = None) -> Iterator[Token]:
    """Yield the tokens of *text* with inline children flattened in place.

    ``text_special`` tokens (escapes, entities) come out as ordinary ``text``
    tokens, still separate from the runs around them.
    """
    md = md or build_markdown()
    for token in md.parse(text):
        if token.type != "inline":
            yield token
            continue
        for child in token.children or ():
            if child.type == "text_special":
                child.type = "text"
            yield child


def heading_level(token: Token) -> int:
    """Level of a heading_open/heading_close token (``h2`` -> 2)."""
    return int(token.tag[1:])


def is_heading_start(token: Token) -> bool:
    return token.type == "heading_open"


def is_heading_end(token: Token, level: int | None = None) -> bool:
    if token.type != "heading_close":
        return False
    return level is None or heading_level(token) == level


def is_text(token: Token) -> bool:
    return token.type == "text"


def html_event(content: str) -> Token:
    """Wrap pre-rendered markup so the renderer emits it verbatim."""
    return Token("html_block", "", 0, content=content, block=True)
