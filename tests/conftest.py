"""Shared test fixtures for Docloom."""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

if TYPE_CHECKING:
    from pathlib import Path

SAMPLE_DOC = """<?xml version="1.0"?>
<doc>
    <assembly>
        <name>Demo</name>
    </assembly>
    <members>
        <member name="T:Demo.Calc">
            <summary>
            A calculator backed by <see cref="T:System.Math"/>.
            </summary>
            <seealso cref="T:Demo.Parser"/>
        </member>
        <member name="M:Demo.Calc.Add(System.Int32,System.Int32)">
            <summary>Adds two numbers.</summary>
            <param name="a">First operand.</param>
            <param name="b">Second operand.</param>
            <returns>The sum, see <see cref="T:System.Math"/>.</returns>
            <exception cref="T:System.OverflowException">On overflow.</exception>
        </member>
        <member name="M:Demo.Calc.Reset">
            <summary>Returns <see langword="null"/> when empty.</summary>
        </member>
    </members>
</doc>
"""


@pytest.fixture()
def tmp_project(tmp_path: Path) -> Path:
    """Create a minimal project structure for testing."""
    (tmp_path / ".docloom").mkdir()
    return tmp_path


@pytest.fixture()
def sample_doc() -> str:
    """Raw text of a compiler-generated XML documentation file."""
    return SAMPLE_DOC


@pytest.fixture()
def doc_file(tmp_path: Path) -> Path:
    """Write the sample XML documentation file."""
    path = tmp_path / "Demo.xml"
    path.write_text(SAMPLE_DOC, encoding="utf-8")
    return path
