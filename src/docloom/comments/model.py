"""Comment model: build a :class:`ParsedComment` from a raw XML doc comment.

Single-valued fields honour the first match only.  Keyed fields keep the
first entry per name and warn about the rest.  Reference lists silently
drop entries whose ``cref`` is not a valid comment id; the resolver, by
contrast, warns and leaves such elements in the tree.
"""

from __future__ import annotations

import html
import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

from docloom.comments.comment_id import Kind, classify
from docloom.comments.dialects import get_dialect
from docloom.comments.markup import MarkupError, inner_xml, parse_markup
from docloom.comments.normalizer import normalize
from docloom.comments.resolver import (
    resolve_langwords,
    resolve_see_also_crefs,
    resolve_see_crefs,
)

if TYPE_CHECKING:
    import xml.etree.ElementTree as ET

    from docloom.comments.context import SourceContext
    from docloom.comments.markup import MarkupTree

logger = logging.getLogger(__name__)

# Emitted by the compiler in place of a comment it could not parse.
MALFORMED_COMMENT_MARKER = "<!-- Badly formed XML comment ignored for member "


@dataclass(frozen=True)
class ReferenceEntry:
    """An ``exception``/``see``/``seealso`` entry with a valid comment id."""

    description: str | None
    target_kind: Kind
    raw_identifier: str

    @property
    def identifier(self) -> str:
        return self.raw_identifier[2:]

    def to_dict(self) -> dict[str, Any]:
        return {
            "description": self.description,
            "kind": self.target_kind.name.lower(),
            "type": self.identifier,
            "comment_id": self.raw_identifier,
        }


@dataclass(frozen=True)
class ParsedComment:
    """Structured content of one doc comment.

    Reference lists are ``None`` when the comment has no valid entry of
    that kind, so "no tag" stays distinguishable from an empty list.
    """

    summary: str | None = None
    remarks: str | None = None
    returns: str | None = None
    parameters: dict[str, str] = field(default_factory=dict)
    type_parameters: dict[str, str] = field(default_factory=dict)
    exceptions: list[ReferenceEntry] | None = None
    sees: list[ReferenceEntry] | None = None
    see_alsos: list[ReferenceEntry] | None = None
    examples: list[str] = field(default_factory=list)

    def parameter(self, name: str) -> str | None:
        if not name:
            raise ValueError("Parameter name must not be empty")
        return self.parameters.get(name)

    def type_parameter(self, name: str) -> str | None:
        if not name:
            raise ValueError("Type parameter name must not be empty")
        return self.type_parameters.get(name)

    def to_dict(self) -> dict[str, Any]:
        def _refs(entries: list[ReferenceEntry] | None) -> list[dict[str, Any]] | None:
            if entries is None:
                return None
            return [entry.to_dict() for entry in entries]

        return {
            "summary": self.summary,
            "remarks": self.remarks,
            "returns": self.returns,
            "parameters": dict(self.parameters),
            "type_parameters": dict(self.type_parameters),
            "exceptions": _refs(self.exceptions),
            "sees": _refs(self.sees),
            "see_alsos": _refs(self.see_alsos),
            "examples": list(self.examples),
        }


# ---------------------------------------------------------------------------
# Field extraction
# ---------------------------------------------------------------------------


def _element_value(tree: MarkupTree, element: ET.Element) -> str:
    """Normalized, entity-decoded inner XML of *element*."""
    return html.unescape(normalize(inner_xml(element), tree.column(element)))


def _single_value(tree: MarkupTree, tag: str) -> str | None:
    element = tree.first_child(tag)
    if element is None:
        return None
    return _element_value(tree, element)


def _keyed_values(
    tree: MarkupTree, tag: str, content_type: str, context: SourceContext
) -> dict[str, str]:
    result: dict[str, str] = {}
    for element in tree.children(tag):
        name = element.get("name", "")
        if not name:
            continue
        if name in result:
            path = context.display_path or ""
            logger.warning(
                "Duplicate %s '%s' found in comments, the latter one is ignored. (%s:%s)",
                content_type,
                name,
                path,
                context.start_line if context.start_line is not None else "",
            )
            continue
        result[name] = _element_value(tree, element)
    return result


def _reference_entries(tree: MarkupTree, tag: str) -> list[ReferenceEntry] | None:
    entries: list[ReferenceEntry] = []
    for element in tree.children(tag):
        comment_id = classify(element.get("cref", ""))
        if comment_id is None:
            continue
        description = _element_value(tree, element) or None
        entries.append(
            ReferenceEntry(
                description=description,
                target_kind=comment_id.kind,
                raw_identifier=comment_id.raw,
            )
        )
    return entries or None


def _resolve_references(tree: MarkupTree, context: SourceContext) -> None:
    try:
        dialect = get_dialect(context.language)
    except ValueError:
        logger.warning(
            "Unsupported language '%s'%s, falling back to csharp.",
            context.language,
            context.describe(),
        )
        dialect = get_dialect("csharp")

    callback = context.on_reference_discovered
    resolve_see_crefs(tree.root, callback, dialect=dialect, source=context)
    resolve_see_also_crefs(tree.root, callback, dialect=dialect, source=context)
    if context.rewrite_langwords:
        resolve_langwords(tree.root, dialect=dialect)


def build_comment(raw: str | None, context: SourceContext) -> ParsedComment | None:
    """Build a :class:`ParsedComment` from *raw* doc comment XML.

    Returns ``None`` for empty input, for the compiler's "badly formed"
    marker and for XML that does not parse.  Never raises for bad input.
    """
    if not raw or not raw.strip():
        return None

    if raw.startswith(MALFORMED_COMMENT_MARKER):
        logger.warning("Invalid doc comment is ignored: %s", raw)
        return None

    try:
        tree = parse_markup(raw)
    except MarkupError as exc:
        logger.warning("Unparsable doc comment%s is ignored: %s", context.describe(), exc)
        return None

    if not context.preserve_raw_references:
        _resolve_references(tree, context)

    return ParsedComment(
        summary=_single_value(tree, "summary"),
        remarks=_single_value(tree, "remarks"),
        returns=_single_value(tree, "returns"),
        parameters=_keyed_values(tree, "param", "parameter", context),
        type_parameters=_keyed_values(tree, "typeparam", "type parameter", context),
        exceptions=_reference_entries(tree, "exception"),
        sees=_reference_entries(tree, "see"),
        see_alsos=_reference_entries(tree, "seealso"),
        examples=[_element_value(tree, element) for element in tree.children("example")],
    )
