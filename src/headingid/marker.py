"""Trailing ``{#id}`` marker extraction.

Works on the text of the last inline run of a heading. Only the first
``{#`` is considered; an opening without a closing ``}`` is left alone.
"""

from __future__ import annotations

_MARKER_OPEN = "{#"
_MARKER_CLOSE = "}"


def find_custom_id(text: str) -> tuple[str, str | None]:
    """Split *text* into the visible heading text and an optional id.

    Returns ``(text, None)`` when there is no complete marker. Otherwise the
    visible part is everything before ``{#`` with trailing whitespace removed,
    and the id is whatever sits between ``{#`` and the next ``}`` (possibly
    empty, never validated).
    """
    start = text.find(_MARKER_OPEN)
    if start == -1:
        return text, None

    inner_start = start + len(_MARKER_OPEN)
    end = text.find(_MARKER_CLOSE, inner_start)
    if end == -1:
        return text, None

    return text[:start].rstrip(), text[inner_start:end]
