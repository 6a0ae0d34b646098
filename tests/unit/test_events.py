"""Unit tests for the flat event stream adapter."""

from __future__ import annotations

from markdown_it.token import Token

from headingid.config import MarkdownSettings, Settings
from headingid.events import (
    build_markdown,
    heading_level,
    html_event,
    is_heading_end,
    is_heading_start,
    is_text,
    parse_events,
)


class TestParseEvents:
    def test_inline_children_are_flattened(self, md) -> None:
        types = [t.type for t in parse_events("## *a* b", md)]
        assert types == ["heading_open", "em_open", "text", "em_close", "text", "heading_close"]

    def test_no_inline_containers_remain(self, md) -> None:
        source = "# T\n\npara `x`\n\n- item\n\n> q"
        assert all(t.type != "inline" for t in parse_events(source, md))

    def test_empty_heading_has_no_content_events(self, md) -> None:
        assert [t.type for t in parse_events("##", md)] == ["heading_open", "heading_close"]

    def test_is_lazy_generator(self, md) -> None:
        stream = parse_events("para", md)
        assert next(stream).type == "paragraph_open"

    def test_default_parser_used_without_md(self) -> None:
        assert [t.type for t in parse_events("# T")] == ["heading_open", "text", "heading_close"]


class TestClassification:
    def test_heading_level(self, md) -> None:
        start, _, end = parse_events("### T", md)
        assert heading_level(start) == 3
        assert heading_level(end) == 3

    def test_heading_start_and_end(self, md) -> None:
        start, text, end = parse_events("## T", md)
        assert is_heading_start(start)
        assert not is_heading_start(text)
        assert is_heading_end(end)
        assert is_heading_end(end, 2)
        assert not is_heading_end(end, 3)
        assert not is_heading_end(start, 2)

    def test_is_text(self, md) -> None:
        _, text, _ = parse_events("## T", md)
        assert is_text(text)
        assert not is_text(Token("code_inline", "code", 0, content="x"))

    def test_html_event_is_block(self) -> None:
        token = html_event("<h1>x</h1>\n")
        assert token.type == "html_block"
        assert token.block
        assert token.content == "<h1>x</h1>\n"


class TestBuildMarkdown:
    def test_defaults_to_commonmark(self) -> None:
        md = build_markdown()
        assert md.options["html"] is True

    def test_html_override(self) -> None:
        settings = Settings(markdown=MarkdownSettings(html=False))
        md = build_markdown(settings)
        assert md.options["html"] is False

    def test_preset_selected(self) -> None:
        settings = Settings(markdown=MarkdownSettings(preset="zero"))
        md = build_markdown(settings)
        # the zero preset has no emphasis rule
        assert [t.type for t in parse_events("*a*", md)] == [
            "paragraph_open",
            "text",
            "paragraph_close",
        ]

    def test_text_join_disabled(self) -> None:
        assert "text_join" not in build_markdown().get_active_rules()["core"]


class TestEscapes:
    def test_backslash_escape_is_its_own_text_event(self, md) -> None:
        events = list(parse_events("## A \\{#x}", md))[1:-1]
        assert [(t.type, t.content) for t in events] == [
            ("text", "A "),
            ("text", "{"),
            ("text", "#x}"),
        ]

    def test_entity_is_its_own_text_event(self, md) -> None:
        events = list(parse_events("a &amp; b", md))[1:-1]
        assert [t.content for t in events] == ["a ", "&", " b"]
        assert all(t.type == "text" for t in events)
