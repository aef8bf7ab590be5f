"""Source context handed to the comment model by the symbol extractor."""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Callable


@dataclass(frozen=True)
class RemoteDetail:
    """Coordinates of the source file inside a remote repository."""

    local_working_directory: str
    relative_path: str
    repo: str | None = None
    branch: str | None = None


@dataclass(frozen=True)
class SourceContext:
    """Provenance of a doc comment plus the flags steering its extraction.

    ``on_reference_discovered`` is called once per resolved ``cref``
    occurrence with the bare identifier.  ``<see langword>`` elements are left
    as written unless ``rewrite_langwords`` is set.
    """

    path: str | None = None
    remote: RemoteDetail | None = None
    start_line: int | None = None
    name: str | None = None
    preserve_raw_references: bool = False
    on_reference_discovered: Callable[[str], None] | None = None
    language: str = "csharp"
    rewrite_langwords: bool = False

    @property
    def display_path(self) -> str | None:
        if self.remote is not None:
            return os.path.join(self.remote.local_working_directory, self.remote.relative_path)
        return self.path

    def describe(self) -> str:
        """Suffix for diagnostics: ``" for <name> defined in <path> Line <n>"``."""
        detail = ""
        if self.name:
            detail += f" for {self.name}"
        path = self.display_path
        if path:
            detail += f" defined in {path} Line {self.start_line if self.start_line is not None else '?'}"
        return detail
