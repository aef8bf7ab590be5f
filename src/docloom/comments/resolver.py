"""Cross-reference resolver: rewrite nested ``see``/``seealso`` crefs into ``xref`` placeholders."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from docloom.comments.comment_id import classify
from docloom.comments.dialects import CSHARP
from docloom.comments.markup import parent_map

if TYPE_CHECKING:
    import xml.etree.ElementTree as ET
    from collections.abc import Callable

    from docloom.comments.context import SourceContext
    from docloom.comments.dialects import LanguageDialect

logger = logging.getLogger(__name__)

SEE_TAG = "see"
SEE_ALSO_TAG = "seealso"


def _is_top_level(
    element: ET.Element, root: ET.Element, parents: dict[ET.Element, ET.Element]
) -> bool:
    """True for the root itself and for its direct children."""
    parent = parents.get(element)
    return parent is None or parent is root


def _replace(
    element: ET.Element,
    replacement: ET.Element,
    parents: dict[ET.Element, ET.Element],
) -> None:
    parent = parents[element]
    replacement.tail = element.tail
    index = list(parent).index(element)
    parent[index] = replacement
    parents[replacement] = parent


def resolve_crefs(
    root: ET.Element,
    tag: str,
    on_reference: Callable[[str], None] | None = None,
    *,
    dialect: LanguageDialect = CSHARP,
    source: SourceContext | None = None,
) -> None:
    """Resolve every ``<tag cref="...">`` element under *root*.

    Valid comment ids lose their two-character prefix and, unless the
    element is top level, are replaced with the dialect's placeholder.
    *on_reference* receives every valid id, replaced or not.  Invalid
    values are logged and left in place.  Failures while walking the tree
    are contained here.
    """
    try:
        parents = parent_map(root)
        candidates = [el for el in root.iter(tag) if el.get("cref") is not None]
        for element in candidates:
            value = element.get("cref", "")
            comment_id = classify(value)
            if comment_id is None:
                detail = source.describe() if source is not None else ""
                logger.warning(
                    'Invalid cref value "%s" found in doc comment%s, ignored.', value, detail
                )
                continue

            identifier = comment_id.identifier
            if not _is_top_level(element, root, parents):
                _replace(element, dialect.build_reference(identifier), parents)

            if on_reference is not None:
                on_reference(identifier)
    except Exception:
        logger.debug("Failed to resolve <%s> references", tag, exc_info=True)


def resolve_see_crefs(
    root: ET.Element,
    on_reference: Callable[[str], None] | None = None,
    *,
    dialect: LanguageDialect = CSHARP,
    source: SourceContext | None = None,
) -> None:
    resolve_crefs(root, SEE_TAG, on_reference, dialect=dialect, source=source)


def resolve_see_also_crefs(
    root: ET.Element,
    on_reference: Callable[[str], None] | None = None,
    *,
    dialect: LanguageDialect = CSHARP,
    source: SourceContext | None = None,
) -> None:
    resolve_crefs(root, SEE_ALSO_TAG, on_reference, dialect=dialect, source=source)


def resolve_langwords(root: ET.Element, *, dialect: LanguageDialect = CSHARP) -> None:
    """Rewrite nested ``<see langword="..."/>`` into keyword placeholders."""
    try:
        parents = parent_map(root)
        candidates = [
            el for el in root.iter(SEE_TAG) if el.get("langword") and el.get("cref") is None
        ]
        for element in candidates:
            if _is_top_level(element, root, parents):
                continue
            word = element.get("langword", "").strip()
            _replace(element, dialect.build_keyword_reference(word), parents)
    except Exception:
        logger.debug("Failed to resolve langword references", exc_info=True)
