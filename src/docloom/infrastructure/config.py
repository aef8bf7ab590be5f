"""Project configuration: ``.docloom/config.yml`` ``comments`` section."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

import yaml

from docloom.comments.context import SourceContext
from docloom.comments.dialects import get_dialect

if TYPE_CHECKING:
    from collections.abc import Callable
    from pathlib import Path

logger = logging.getLogger(__name__)

CONFIG_DIR = ".docloom"
CONFIG_FILE = "config.yml"


@dataclass(frozen=True)
class DocloomConfig:
    """Extraction settings shared by every comment of a project."""

    language: str = "csharp"
    preserve_raw_references: bool = False
    rewrite_langwords: bool = False

    def context_for(
        self,
        *,
        path: str | None = None,
        name: str | None = None,
        start_line: int | None = None,
        on_reference_discovered: Callable[[str], None] | None = None,
    ) -> SourceContext:
        """Build the :class:`SourceContext` for one comment of this project."""
        return SourceContext(
            path=path,
            start_line=start_line,
            name=name,
            preserve_raw_references=self.preserve_raw_references,
            on_reference_discovered=on_reference_discovered,
            language=self.language,
            rewrite_langwords=self.rewrite_langwords,
        )


def config_path(project_root: Path) -> Path:
    return project_root / CONFIG_DIR / CONFIG_FILE


def load_config(project_root: Path) -> DocloomConfig:
    """Load the ``comments`` section of ``.docloom/config.yml``.

    Falls back to defaults for a missing file, unreadable YAML and keys
    of the wrong type.
    """
    path = config_path(project_root)
    if not path.is_file():
        return DocloomConfig()

    try:
        with path.open("r", encoding="utf-8") as fh:
            data = yaml.safe_load(fh)
    except (OSError, yaml.YAMLError):
        logger.warning("Failed to read %s, using default settings", path)
        return DocloomConfig()

    if not isinstance(data, dict):
        return DocloomConfig()

    section = data.get("comments")
    if not isinstance(section, dict):
        return DocloomConfig()

    defaults = DocloomConfig()
    language = section.get("language", defaults.language)
    if not isinstance(language, str):
        logger.warning("Ignoring non-string comments.language in %s", path)
        language = defaults.language
    else:
        try:
            language = get_dialect(language).name
        except ValueError:
            logger.warning("Unsupported comments.language '%s' in %s", language, path)
            language = defaults.language

    preserve = section.get("preserve_raw_references", defaults.preserve_raw_references)
    if not isinstance(preserve, bool):
        logger.warning("Ignoring non-boolean comments.preserve_raw_references in %s", path)
        preserve = defaults.preserve_raw_references

    rewrite = section.get("rewrite_langwords", defaults.rewrite_langwords)
    if not isinstance(rewrite, bool):
        logger.warning("Ignoring non-boolean comments.rewrite_langwords in %s", path)
        rewrite = defaults.rewrite_langwords

    return DocloomConfig(
        language=language,
        preserve_raw_references=preserve,
        rewrite_langwords=rewrite,
    )
