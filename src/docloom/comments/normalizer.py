"""Whitespace normalizer for doc comment inner XML.

Lines starting with an element reset the reference column; text lines are
dedented to the column of the last element line, but never by more than
their own indentation.  Newlines just inside ``<code>`` regions are
trimmed so code samples keep their interior alignment.
"""

from __future__ import annotations

import re

_LINE_BREAK_RE = re.compile(r"\r\n|\r|\n")
_CODE_ELEMENT_RE = re.compile(r"<code[^>]*>([\s\S]*?)</code>")


def _leading_whitespace(line: str) -> int:
    return len(line) - len(line.lstrip())


def _trim_code_newlines(match: re.Match[str]) -> str:
    whole = match.group(0)
    start, end = match.span(1)
    offset = match.start(0)
    inner = match.group(1).strip("\n")
    return whole[: start - offset] + inner + whole[end - offset :]


def normalize(content: str, parent_indent: int) -> str:
    """Re-indent *content* relative to *parent_indent*.

    Whitespace-only lines collapse to empty strings.  A line whose first
    non-blank character is ``<`` moves the reference column to its own
    indentation; every line is dedented by ``min(column, own indent)``.
    """
    if not content:
        return content

    indent = max(parent_indent, 0)
    normalized: list[str] = []
    for line in _LINE_BREAK_RE.split(content):
        if not line.strip():
            normalized.append("")
            continue
        leading = _leading_whitespace(line)
        if line[leading] == "<":
            indent = leading
        normalized.append(line[min(indent, leading):])

    return _CODE_ELEMENT_RE.sub(_trim_code_newlines, "\n".join(normalized))
