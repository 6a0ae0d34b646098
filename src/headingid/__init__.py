"""markdown-heading-id: explicit ``{#id}`` heading anchors for markdown-it-py."""

from __future__ import annotations

import warnings
from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("markdown-heading-id")
except PackageNotFoundError:
    # Source-tree execution without installed package metadata.
    warnings.warn(
        "Package metadata for 'markdown-heading-id' not found; using fallback version '0.0.0+unknown'.",
        RuntimeWarning,
        stacklevel=2,
    )
    __version__ = "0.0.0+unknown"

from headingid.api import markdown_to_html  # noqa: E402
from headingid.filter import HeadingId  # noqa: E402
from headingid.html import escape_href, escape_html, render_html  # noqa: E402
from headingid.log import setup_logging  # noqa: E402
from headingid.marker import find_custom_id  # noqa: E402

__all__ = [
    "HeadingId",
    "__version__",
    "escape_href",
    "escape_html",
    "find_custom_id",
    "markdown_to_html",
    "render_html",
    "setup_logging",
]
