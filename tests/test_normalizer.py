"""Tests for docloom.comments.normalizer — whitespace re-flow of inner XML."""

from __future__ import annotations

import pytest

from docloom.comments.normalizer import normalize


class TestNormalize:
    def test_empty_content_is_noop(self) -> None:
        assert normalize("", 4) == ""

    @pytest.mark.parametrize("indent", [0, 3, 12])
    def test_whitespace_only_lines_collapse(self, indent: int) -> None:
        assert normalize("   \n\t\n  ", indent) == "\n\n"

    def test_text_dedented_to_parent_column(self) -> None:
        assert normalize("    hello\n    world", 4) == "hello\nworld"

    def test_never_strips_more_than_line_has(self) -> None:
        assert normalize("  a\n      b", 4) == "a\n  b"

    def test_element_line_resets_column(self) -> None:
        content = "\n        <para>\n          Text\n        </para>\n    "
        assert normalize(content, 4) == "\n<para>\n  Text\n</para>\n"

    def test_sibling_text_follows_last_element_column(self) -> None:
        content = "  <b>x</b>\n    tail\n  more"
        assert normalize(content, 8) == "<b>x</b>\n  tail\nmore"

    def test_crlf_line_breaks(self) -> None:
        assert normalize("  a\r\n  b\r  c", 2) == "a\nb\nc"

    def test_negative_indent_treated_as_zero(self) -> None:
        assert normalize("  a", -2) == "  a"

    def test_code_boundary_newlines_trimmed(self) -> None:
        assert normalize("<code>\n  foo();\n</code>", 0) == "<code>  foo();</code>"

    def test_code_interior_kept_verbatim(self) -> None:
        content = "<code>\nif (x)\n{\n    y();\n}\n</code>"
        assert normalize(content, 0) == "<code>if (x)\n{\n    y();\n}</code>"

    def test_code_with_attributes(self) -> None:
        content = '<code language="cs">\nvar x = 1;\n</code>'
        assert normalize(content, 0) == '<code language="cs">var x = 1;</code>'

    def test_code_nested_markup_is_opaque(self) -> None:
        assert normalize("<code>\n<b>x</b>\n</code>", 0) == "<code><b>x</b></code>"

    def test_multiple_code_regions(self) -> None:
        content = "<code>\na\n</code>\ntext\n<code>\nb\n</code>"
        assert normalize(content, 0) == "<code>a</code>\ntext\n<code>b</code>"

    def test_inline_c_not_trimmed(self) -> None:
        assert normalize("<c>\nx\n</c>", 0) == "<c>\nx\n</c>"

    @pytest.mark.parametrize(
        "content",
        [
            "\n  <para>\n    Hi\n  </para>\n<code>\n  x\n</code>",
            "plain text\n\n  <list type=\"bullet\">\n    <item>one</item>\n  </list>",
            "",
        ],
    )
    def test_idempotent(self, content: str) -> None:
        # Holds only for a zero baseline; a positive one strips again on each pass.
        once = normalize(content, 0)
        assert normalize(once, 0) == once

    def test_positive_baseline_not_idempotent(self) -> None:
        once = normalize("      text\n  <a/>", 4)
        assert once == "  text\n<a/>"
        assert normalize(once, 4) == "text\n<a/>"
