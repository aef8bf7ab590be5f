"""Doc comment markup tree: position-aware parsing and inner XML serialization."""

from __future__ import annotations

import re
import xml.etree.ElementTree as ET
from dataclasses import dataclass, field
from xml.parsers import expat
from xml.sax.saxutils import escape

ROOT_TAG = "member"

# Raw comments may arrive as bare fragments (``<summary>..</summary><param ..>``).
_MEMBER_ROOT_RE = re.compile(
    r"^\s*(?:<\?xml[^>]*\?>\s*)?(?:<!--[\s\S]*?-->\s*)*<" + ROOT_TAG + r"[\s/>]"
)
_XML_DECLARATION_RE = re.compile(r"<\?xml[^>]*\?>")


class MarkupError(ValueError):
    """Raised when a doc comment is not well-formed XML."""

    def __init__(self, message: str, line: int | None = None) -> None:
        super().__init__(message)
        self.line = line


@dataclass
class MarkupTree:
    """Parsed doc comment with the start position of every parsed element.

    Positions are ``(line, column)`` with 1-based lines and 0-based
    columns pointing at the element's ``<``.  Elements inserted after
    parsing have no position.
    """

    root: ET.Element
    positions: dict[ET.Element, tuple[int, int]] = field(default_factory=dict)
    line_offset: int = 0

    def column(self, element: ET.Element) -> int:
        position = self.positions.get(element)
        if position is None:
            return 0
        return position[1]

    def line(self, element: ET.Element) -> int | None:
        position = self.positions.get(element)
        if position is None:
            return None
        return position[0] - self.line_offset

    def children(self, tag: str) -> list[ET.Element]:
        """Direct children of the ``member`` root with *tag*, in document order."""
        if self.root.tag != ROOT_TAG:
            return []
        return self.root.findall(tag)

    def first_child(self, tag: str) -> ET.Element | None:
        if self.root.tag != ROOT_TAG:
            return None
        return self.root.find(tag)


def _wrap_fragment(xml: str) -> tuple[str, int]:
    if _MEMBER_ROOT_RE.match(xml):
        return xml, 0
    # A declaration must stay first; it is blanked out in the fragment so
    # the fragment's columns do not move.
    declaration = ""
    match = _XML_DECLARATION_RE.match(xml)
    if match is not None:
        declaration = match.group(0)
        xml = " " * len(declaration) + xml[match.end():]
    # The wrapper sits on its own line so columns of the fragment are kept.
    return f"{declaration}<{ROOT_TAG}>\n{xml}\n</{ROOT_TAG}>", 1


def parse_markup(xml: str, *, wrap_fragments: bool = True) -> MarkupTree:
    """Parse *xml* into a :class:`MarkupTree`.

    Comments inside elements are kept so they round-trip through
    :func:`inner_xml`.  With *wrap_fragments*, input not rooted at
    ``<member>`` is wrapped in one.

    Raises
    ------
    MarkupError
        If the text is not well-formed.
    """
    source, line_offset = _wrap_fragment(xml) if wrap_fragments else (xml, 0)

    builder = ET.TreeBuilder(insert_comments=True)
    parser = expat.ParserCreate()
    parser.buffer_text = True
    positions: dict[ET.Element, tuple[int, int]] = {}

    def start(tag: str, attrs: dict[str, str]) -> None:
        element = builder.start(tag, attrs)
        positions[element] = (parser.CurrentLineNumber, parser.CurrentColumnNumber)

    parser.StartElementHandler = start
    parser.EndElementHandler = builder.end
    parser.CharacterDataHandler = builder.data
    parser.CommentHandler = builder.comment

    try:
        parser.Parse(source, True)
    except expat.ExpatError as exc:
        line = exc.lineno - line_offset if exc.lineno else None
        raise MarkupError(f"Malformed doc comment: {exc}", line) from exc

    root = builder.close()
    return MarkupTree(root=root, positions=positions, line_offset=line_offset)


def inner_xml(element: ET.Element) -> str:
    """Serialize the content of *element* without its own start and end tags."""
    parts = [escape(element.text or "")]
    parts.extend(ET.tostring(child, encoding="unicode") for child in element)
    return "".join(parts)


def parent_map(root: ET.Element) -> dict[ET.Element, ET.Element]:
    return {child: parent for parent in root.iter() for child in parent}
