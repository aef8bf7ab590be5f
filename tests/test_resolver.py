"""Tests for docloom.comments.resolver — see/seealso cref rewriting."""

from __future__ import annotations

import logging
import xml.etree.ElementTree as ET

import pytest

from docloom.comments.context import SourceContext
from docloom.comments.dialects import CSHARP, VISUAL_BASIC
from docloom.comments.markup import parse_markup
from docloom.comments.resolver import (
    resolve_langwords,
    resolve_see_also_crefs,
    resolve_see_crefs,
)


@pytest.fixture(autouse=True)
def _capture_warnings(caplog: pytest.LogCaptureFixture) -> None:
    caplog.set_level(logging.WARNING, logger="docloom")


def _warnings(caplog: pytest.LogCaptureFixture) -> list[str]:
    return [r.getMessage() for r in caplog.records if r.levelno == logging.WARNING]


class TestResolveSeeCrefs:
    def test_nested_see_replaced_with_xref(self) -> None:
        tree = parse_markup(
            '<member><summary><para>Use <see cref="T:Foo"/> now.</para></summary></member>'
        )
        calls: list[str] = []
        resolve_see_crefs(tree.root, calls.append)

        para = tree.root.find("summary/para")
        assert para is not None
        assert para.find("see") is None
        xref = para.find("xref")
        assert xref is not None
        assert xref.get("href") == "Foo"
        assert xref.get("data-throw-if-not-resolved") == "false"
        assert xref.tail == " now."
        assert calls == ["Foo"]

    def test_top_level_see_left_untouched(self) -> None:
        tree = parse_markup('<member><see cref="T:Foo"/></member>')
        calls: list[str] = []
        resolve_see_crefs(tree.root, calls.append)

        assert tree.root[0].tag == "see"
        assert tree.root[0].get("cref") == "T:Foo"
        assert calls == ["Foo"]

    def test_callback_per_occurrence(self) -> None:
        tree = parse_markup(
            '<member><summary><see cref="T:Foo"/> and <see cref="T:Foo"/></summary></member>'
        )
        calls: list[str] = []
        resolve_see_crefs(tree.root, calls.append)
        assert calls == ["Foo", "Foo"]

    def test_invalid_cref_warned_and_left_in_place(
        self, caplog: pytest.LogCaptureFixture
    ) -> None:
        tree = parse_markup('<member><summary><see cref="!:Dictionary"/></summary></member>')
        calls: list[str] = []
        resolve_see_crefs(tree.root, calls.append)

        see = tree.root.find("summary/see")
        assert see is not None
        assert see.get("cref") == "!:Dictionary"
        assert calls == []
        messages = _warnings(caplog)
        assert len(messages) == 1
        assert 'Invalid cref value "!:Dictionary"' in messages[0]

    def test_warning_carries_provenance(self, caplog: pytest.LogCaptureFixture) -> None:
        tree = parse_markup('<member><summary><see cref="Foo"/></summary></member>')
        source = SourceContext(path="src/Calc.cs", start_line=12, name="T:Demo.Calc")
        resolve_see_crefs(tree.root, None, source=source)
        messages = _warnings(caplog)
        assert len(messages) == 1
        assert " for T:Demo.Calc defined in src/Calc.cs Line 12" in messages[0]

    def test_invalid_does_not_stop_later_elements(self) -> None:
        tree = parse_markup(
            '<member><summary><see cref="bad"/><see cref="M:Demo.Run"/></summary></member>'
        )
        calls: list[str] = []
        resolve_see_crefs(tree.root, calls.append)
        summary = tree.root.find("summary")
        assert summary is not None
        assert [child.tag for child in summary] == ["see", "xref"]
        assert calls == ["Demo.Run"]

    def test_see_without_cref_ignored(self) -> None:
        tree = parse_markup('<member><summary><see langword="null"/></summary></member>')
        calls: list[str] = []
        resolve_see_crefs(tree.root, calls.append)
        assert tree.root.find("summary/see") is not None
        assert calls == []

    def test_seealso_not_touched_by_see_pass(self) -> None:
        tree = parse_markup('<member><summary><seealso cref="T:Foo"/></summary></member>')
        resolve_see_crefs(tree.root)
        assert tree.root.find("summary/seealso") is not None

    def test_failing_callback_is_contained(self) -> None:
        tree = parse_markup('<member><summary><see cref="T:Foo"/></summary></member>')

        def boom(identifier: str) -> None:
            raise RuntimeError(identifier)

        resolve_see_crefs(tree.root, boom)

    def test_serialized_placeholder(self) -> None:
        tree = parse_markup('<member><summary><see cref="T:A.B"/></summary></member>')
        resolve_see_crefs(tree.root, dialect=CSHARP)
        summary = tree.root.find("summary")
        assert summary is not None
        assert ET.tostring(summary, encoding="unicode") == (
            '<summary><xref href="A.B" data-throw-if-not-resolved="false" /></summary>'
        )


class TestResolveSeeAlsoCrefs:
    def test_nested_seealso_replaced(self) -> None:
        tree = parse_markup(
            '<member><remarks><seealso cref="T:Bar">Bar</seealso></remarks></member>'
        )
        calls: list[str] = []
        resolve_see_also_crefs(tree.root, calls.append)
        xref = tree.root.find("remarks/xref")
        assert xref is not None
        assert xref.get("href") == "Bar"
        assert calls == ["Bar"]

    def test_top_level_seealso_untouched(self) -> None:
        tree = parse_markup('<member><seealso cref="T:Bar"/></member>')
        calls: list[str] = []
        resolve_see_also_crefs(tree.root, calls.append)
        assert tree.root[0].tag == "seealso"
        assert calls == ["Bar"]


class TestResolveLangwords:
    def test_csharp_keyword(self) -> None:
        tree = parse_markup('<member><summary>Returns <see langword="null"/>.</summary></member>')
        resolve_langwords(tree.root, dialect=CSHARP)
        xref = tree.root.find("summary/xref")
        assert xref is not None
        assert xref.get("uid") == "langword_csharp_null"
        assert xref.get("name") == "null"
        assert xref.tail == "."

    def test_vb_keyword_spelling(self) -> None:
        tree = parse_markup('<member><summary><see langword="null"/></summary></member>')
        resolve_langwords(tree.root, dialect=VISUAL_BASIC)
        xref = tree.root.find("summary/xref")
        assert xref is not None
        assert xref.get("uid") == "langword_vb_null"
        assert xref.get("name") == "Nothing"

    def test_top_level_langword_untouched(self) -> None:
        tree = parse_markup('<member><see langword="true"/></member>')
        resolve_langwords(tree.root)
        assert tree.root[0].tag == "see"
