"""Heading filter for flat markdown-it event streams.

``HeadingId`` wraps an iterator of tokens and is itself an iterator of
tokens, so it can sit anywhere between :func:`headingid.events.parse_events`
and :func:`headingid.html.render_html`, including after another filter.

Everything outside a heading is forwarded as-is. A heading span is buffered
up to the ``heading_close`` of the same level, because the ``{#id}`` marker
only shows up at its tail, and is replaced by a single ``html_block`` token::

    ## Heading {#heading-id}   ->   <h2 id="heading-id">Heading</h2>
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import structlog
from markdown_it import MarkdownIt

from headingid.config import FilterSettings
from headingid.errors import ErrorCode, HeadingIdError
from headingid.events import heading_level, html_event, is_heading_end, is_heading_start, is_text
from headingid.html import escape_href, escape_html, render_html
from headingid.marker import find_custom_id

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator

    from markdown_it.token import Token

    from headingid.config import Settings

log = structlog.get_logger()


class HeadingId:
    """Collapse each heading span into one HTML token carrying its ``id``."""

    def __init__(
        self,
        events: Iterable[Token],
        *,
        settings: Settings | None = None,
        md: MarkdownIt | None = None,
    ) -> None:
        self._events = iter(events)
        self._md = md or MarkdownIt("commonmark")
        filter_settings = settings.filter if settings is not None else FilterSettings()
        self._unterminated = filter_settings.unterminated_heading

    def __iter__(self) -> Iterator[Token]:
        return self

    def __next__(self) -> Token:
        while True:
            event = next(self._events)
            if not is_heading_start(event):
                return event
            heading = self._convert_heading(heading_level(event))
            # A dropped unterminated heading yields nothing; the upstream is
            # exhausted, so the next pull raises StopIteration.
            if heading is not None:
                return heading

    def _convert_heading(self, level: int) -> Token | None:
        buffer: list[Token] = []
        for event in self._events:
            if is_heading_end(event, level):
                break
            buffer.append(event)
        else:
            if not self._handle_unterminated(level, len(buffer)):
                return None

        return html_event(self._render_heading(level, buffer))

    def _handle_unterminated(self, level: int, buffered: int) -> bool:
        """Apply the unterminated-heading policy. True means flush the buffer."""
        if self._unterminated == "error":
            raise HeadingIdError(
                ErrorCode.UNTERMINATED_HEADING,
                f"Input ended inside an h{level} heading",
                suggestion="Pass a complete token stream or use the 'flush' policy.",
            )
        log.warning(
            "unterminated_heading",
            level=level,
            buffered=buffered,
            policy=self._unterminated,
        )
        return self._unterminated == "flush"

    def _render_heading(self, level: int, buffer: list[Token]) -> str:
        if not buffer:
            return f"<h{level}></h{level}>\n"

        *init, last = buffer
        html = render_html(init, self._md)
        start_tag = f"<h{level}>"

        if is_text(last):
            text, heading_id = find_custom_id(last.content)
            html += escape_html(text)
            if heading_id is not None:
                start_tag = f'<h{level} id="{escape_href(heading_id)}">'
                log.debug("heading_id_extracted", level=level, heading_id=heading_id)
        else:
            html += render_html([last], self._md)

        return f"{start_tag}{html}</h{level}>\n"
