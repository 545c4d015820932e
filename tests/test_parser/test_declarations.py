"""Tests for declaration extraction from CSS text."""

from stylescope.excerpt import extract_source
from stylescope.model import CSSProperty, SourceRange
from stylescope.parser import parse_declarations


# ---------------------------------------------------------------------------
# Basic rules
# ---------------------------------------------------------------------------


class TestSingleRule:
    def test_one_declaration(self):
        [decl] = parse_declarations("a { color: red; }\n")
        assert decl.selector == "a"
        assert decl.property == CSSProperty(name="color", value="red")
        assert decl.range == SourceRange(start_line=0, start_column=4, end_line=0, end_column=14)

    def test_range_excludes_semicolon(self):
        content = "a { color: red; }\n"
        [decl] = parse_declarations(content)
        assert extract_source(content, decl.range) == "color: red"

    def test_last_declaration_without_semicolon(self):
        content = "a { color: red }"
        [decl] = parse_declarations(content)
        assert decl.property.value == "red"
        assert extract_source(content, decl.range) == "color: red"

    def test_important_is_part_of_the_value(self):
        [decl] = parse_declarations("a { color: red !important; }")
        assert decl.property.value == "red !important"


class TestMultipleRules:
    def test_traversal_order(self):
        content = (
            ".box {\n"
            "  display: box;\n"
            "  color: blue;\n"
            "}\n"
            "p { margin: 0; }\n"
        )
        decls = parse_declarations(content)
        assert [(d.selector, d.property.name, d.property.value) for d in decls] == [
            (".box", "display", "box"),
            (".box", "color", "blue"),
            ("p", "margin", "0"),
        ]
        assert decls[1].range == SourceRange(2, 2, 2, 13)
        assert decls[2].range.start_line == 4

    def test_selector_list_is_normalised(self):
        [decl] = parse_declarations("a,\nb > c { color: red; }")
        assert decl.selector == "a, b > c"

    def test_nested_in_media_query(self):
        [decl] = parse_declarations("@media print {\n  .x { display: none; }\n}\n")
        assert decl.selector == ".x"
        assert decl.property == CSSProperty(name="display", value="none")
        assert decl.range.start_line == 1

    def test_at_rule_block(self):
        [decl] = parse_declarations("@font-face { font-family: Foo; }")
        assert decl.selector == "@font-face"
        assert decl.property.name == "font-family"


# ---------------------------------------------------------------------------
# Ranges
# ---------------------------------------------------------------------------


class TestRanges:
    def test_multi_line_declaration(self):
        content = (
            ".grid {\n"
            "  grid-template-areas:\n"
            '    "a b"\n'
            '    "c d";\n'
            "}\n"
        )
        [decl] = parse_declarations(content)
        assert decl.range == SourceRange(start_line=1, start_column=2, end_line=3, end_column=9)
        assert decl.property.name == "grid-template-areas"
        assert extract_source(content, decl.range) == (
            'grid-template-areas:\n    "a b"\n    "c d"'
        )

    def test_columns_count_characters_not_bytes(self):
        content = 'a { content: "é"; color: red; }'
        decls = parse_declarations(content)
        color = decls[1]
        assert color.range.start_column == 18
        assert extract_source(content, color.range) == "color: red"

    def test_value_split_on_first_colon_only(self):
        [decl] = parse_declarations('a { background: url("http://x/y.png"); }')
        assert decl.property.name == "background"
        assert decl.property.value == 'url("http://x/y.png")'


class TestEmpty:
    def test_empty_string(self):
        assert parse_declarations("") == ()

    def test_rule_without_declarations(self):
        assert parse_declarations("a {}") == ()
