"""Tests for the stylesheet data model."""

import pytest

from stylescope.model import (
    CSSProperty,
    SourceRange,
    StyleSheetHeader,
    StyleSheetOrigin,
    StyleSheetRecord,
)


class TestCSSProperty:
    def test_split_and_trim(self):
        assert CSSProperty.from_text("  display :  box ") == CSSProperty("display", "box")

    def test_split_on_first_colon(self):
        prop = CSSProperty.from_text('background: url("a:b")')
        assert prop.name == "background"
        assert prop.value == 'url("a:b")'

    def test_no_colon(self):
        assert CSSProperty.from_text("color") == CSSProperty("color", "")


class TestSourceRange:
    def test_single_line(self):
        assert SourceRange(3, 1, 3, 9).is_single_line
        assert not SourceRange(3, 1, 4, 0).is_single_line

    def test_frozen(self):
        r = SourceRange(0, 0, 0, 1)
        with pytest.raises(AttributeError):
            r.start_line = 2


class TestStyleSheetHeader:
    def test_from_event_payload(self):
        header = StyleSheetHeader.from_payload(
            {"header": {"styleSheetId": "42.1", "origin": "regular", "sourceURL": "https://x/a.css"}}
        )
        assert header == StyleSheetHeader(
            id="42.1", origin=StyleSheetOrigin.REGULAR, source_url="https://x/a.css"
        )

    def test_from_bare_header_without_url(self):
        header = StyleSheetHeader.from_payload({"styleSheetId": 7, "origin": "injected"})
        assert header.id == "7"
        assert header.origin is StyleSheetOrigin.INJECTED
        assert header.source_url == ""

    def test_unknown_origin(self):
        header = StyleSheetHeader.from_payload({"styleSheetId": "1", "origin": "mystery"})
        assert header.origin is None


class TestStyleSheetRecord:
    def test_from_header(self):
        header = StyleSheetHeader(id="1", origin=StyleSheetOrigin.REGULAR, source_url="a.css")
        record = StyleSheetRecord.from_header(header, "a {}", [])
        assert record.id == "1"
        assert record.source_url == "a.css"
        assert record.declarations == ()
