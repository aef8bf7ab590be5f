"""Output dialects: how placeholder cross-reference elements are spelled per language."""

from __future__ import annotations

import xml.etree.ElementTree as ET
from dataclasses import dataclass, field

XREF_TAG = "xref"
# Attribute telling the downstream linker that an unresolved href is not fatal.
SOFT_FAIL_ATTR = "data-throw-if-not-resolved"


@dataclass(frozen=True)
class LanguageDialect:
    """Strategy building cross-reference placeholders for one language."""

    name: str
    keywords: dict[str, str] = field(default_factory=dict)

    def keyword_text(self, word: str) -> str:
        """Return the language's spelling of the keyword *word*."""
        return self.keywords.get(word, word)

    def build_reference(self, identifier: str) -> ET.Element:
        """Placeholder for a resolved comment id (prefix already stripped)."""
        return ET.Element(XREF_TAG, {"href": identifier, SOFT_FAIL_ATTR: "false"})

    def build_keyword_reference(self, word: str) -> ET.Element:
        """Placeholder for ``<see langword="..."/>``, keyed ``langword_<lang>_<word>``."""
        return ET.Element(
            XREF_TAG,
            {
                "uid": f"langword_{self.name}_{word}",
                "name": self.keyword_text(word),
                "href": "",
            },
        )


CSHARP = LanguageDialect(name="csharp")

VISUAL_BASIC = LanguageDialect(
    name="vb",
    keywords={
        "null": "Nothing",
        "true": "True",
        "false": "False",
        "static": "Shared",
        "abstract": "MustInherit",
        "sealed": "NotInheritable",
        "virtual": "Overridable",
        "this": "Me",
        "base": "MyBase",
    },
)

_DIALECTS: dict[str, LanguageDialect] = {
    "csharp": CSHARP,
    "cs": CSHARP,
    "c#": CSHARP,
    "vb": VISUAL_BASIC,
    "visualbasic": VISUAL_BASIC,
}


def get_dialect(language: str) -> LanguageDialect:
    """Look up a dialect by language name (case-insensitive).

    Raises ``ValueError`` for unknown languages.
    """
    dialect = _DIALECTS.get(language.strip().lower())
    if dialect is None:
        raise ValueError(f"Unsupported language: {language!r}")
    return dialect


def supported_languages() -> list[str]:
    return sorted({dialect.name for dialect in _DIALECTS.values()})
