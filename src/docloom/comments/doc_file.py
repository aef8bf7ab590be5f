"""Compiler-generated XML documentation files: split into per-member comments."""

from __future__ import annotations

import xml.etree.ElementTree as ET
from dataclasses import dataclass
from typing import TYPE_CHECKING

from docloom.comments.markup import ROOT_TAG, parse_markup

if TYPE_CHECKING:
    from collections.abc import Iterator
    from pathlib import Path


@dataclass(frozen=True)
class MemberComment:
    """Raw XML of one ``<member>`` entry and where it starts in the file."""

    name: str
    line: int | None
    xml: str


def iter_members(xml_text: str) -> Iterator[MemberComment]:
    """Yield every ``<member>`` of a ``doc/members`` documentation file.

    Each member is re-serialized on its own; its inner lines keep their
    original indentation, which is what the normalizer works from.

    Raises
    ------
    MarkupError
        If the file is not well-formed.
    """
    tree = parse_markup(xml_text, wrap_fragments=False)
    for member in tree.root.iter(ROOT_TAG):
        tail, member.tail = member.tail, None
        try:
            raw = ET.tostring(member, encoding="unicode")
        finally:
            member.tail = tail
        yield MemberComment(name=member.get("name", ""), line=tree.line(member), xml=raw)


def read_doc_file(path: Path) -> list[MemberComment]:
    """Read *path* (UTF-8, BOM tolerated) and return its member comments."""
    text = path.read_text(encoding="utf-8-sig")
    return list(iter_members(text))
