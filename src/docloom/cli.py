"""Docloom CLI entry point."""

from __future__ import annotations

import dataclasses
import json
import logging
import sys
from pathlib import Path
from typing import TYPE_CHECKING

import click

from docloom import __version__
from docloom.comments.dialects import supported_languages

if TYPE_CHECKING:
    from docloom.comments.doc_file import MemberComment
    from docloom.comments.model import ParsedComment
    from docloom.infrastructure.config import DocloomConfig


@click.group()
@click.version_option(version=__version__, prog_name="docloom")
@click.option("--verbose", "-v", is_flag=True, help="Verbose output.")
@click.option("--quiet", "-q", is_flag=True, help="Minimal output (errors only).")
@click.pass_context
def main(ctx: click.Context, *, verbose: bool, quiet: bool) -> None:
    """Docloom - doc comment extraction and cref resolution."""
    ctx.ensure_object(dict)
    ctx.obj["verbose"] = verbose
    ctx.obj["quiet"] = quiet

    level = logging.WARNING
    if verbose:
        level = logging.DEBUG
    elif quiet:
        level = logging.ERROR
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")


def _load_settings(
    project: Path | None,
    *,
    language: str | None = None,
    preserve_raw: bool = False,
    rewrite_langwords: bool = False,
) -> DocloomConfig:
    """Load ``.docloom/config.yml`` and apply command line overrides."""
    from docloom.infrastructure.config import load_config

    config = load_config(project or Path.cwd())
    overrides: dict[str, object] = {}
    if language is not None:
        overrides["language"] = language
    if preserve_raw:
        overrides["preserve_raw_references"] = True
    if rewrite_langwords:
        overrides["rewrite_langwords"] = True
    return dataclasses.replace(config, **overrides)  # type: ignore[arg-type]


def _read_members(doc_file: Path) -> list[MemberComment]:
    from docloom.comments.doc_file import read_doc_file
    from docloom.comments.markup import MarkupError

    try:
        return read_doc_file(doc_file)
    except MarkupError as exc:
        click.echo(f"Error: {doc_file}: {exc}", err=True)
        sys.exit(1)


def _format_rich(results: list[tuple[str, ParsedComment | None]]) -> None:
    from rich.console import Console
    from rich.markup import escape
    from rich.panel import Panel
    from rich.table import Table

    console = Console()
    for name, model in results:
        if model is None:
            console.print(f"[yellow]skipped[/] {escape(name)}")
            continue

        body = Table(show_header=False, box=None, padding=(0, 1))
        body.add_column("field", style="cyan")
        body.add_column("value")
        for label, value in (
            ("summary", model.summary),
            ("remarks", model.remarks),
            ("returns", model.returns),
        ):
            if value:
                body.add_row(label, escape(value.strip()))
        for param, text in model.parameters.items():
            body.add_row(f"param {escape(param)}", escape(text.strip()))
        for param, text in model.type_parameters.items():
            body.add_row(f"typeparam {escape(param)}", escape(text.strip()))
        for label, entries in (
            ("exception", model.exceptions),
            ("see", model.sees),
            ("seealso", model.see_alsos),
        ):
            for entry in entries or []:
                text = f"{entry.raw_identifier} {entry.description or ''}".strip()
                body.add_row(label, escape(text))
        for example in model.examples:
            body.add_row("example", escape(example.strip()))

        console.print(Panel(body, title=escape(name), border_style="blue"))


@main.command()
@click.argument(
    "doc_file",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
)
@click.option("--member", "member_name", default=None, help="Only this member (e.g. T:Foo.Bar).")
@click.option("--json", "output_json", is_flag=True, help="Output as JSON.")
@click.option(
    "--language",
    type=click.Choice(supported_languages()),
    default=None,
    help="Output dialect (default: from config.yml or 'csharp').",
)
@click.option(
    "--preserve-raw",
    is_flag=True,
    default=False,
    help="Keep see/seealso elements as written (no xref rewrite).",
)
@click.option(
    "--rewrite-langwords",
    is_flag=True,
    default=False,
    help="Rewrite <see langword> into keyword xref placeholders.",
)
@click.option(
    "--project",
    type=click.Path(exists=True, file_okay=False, path_type=Path),
    default=None,
    help="Project root (default: current directory).",
)
def extract(
    doc_file: Path,
    *,
    member_name: str | None,
    output_json: bool,
    language: str | None,
    preserve_raw: bool,
    rewrite_langwords: bool,
    project: Path | None,
) -> None:
    """Extract structured documentation from an XML documentation file."""
    from docloom.comments.model import build_comment

    config = _load_settings(
        project,
        language=language,
        preserve_raw=preserve_raw,
        rewrite_langwords=rewrite_langwords,
    )
    members = _read_members(doc_file)
    if member_name is not None:
        members = [m for m in members if m.name == member_name]
        if not members:
            click.echo(f"Error: member '{member_name}' not found in {doc_file}", err=True)
            sys.exit(1)

    results: list[tuple[str, ParsedComment | None]] = []
    for member in members:
        context = config.context_for(
            path=str(doc_file), name=member.name, start_line=member.line
        )
        model = build_comment(member.xml, context)
        results.append((member.name, model))

    if output_json:
        data = [
            {"name": name, "comment": model.to_dict() if model is not None else None}
            for name, model in results
        ]
        click.echo(json.dumps(data, ensure_ascii=False, indent=2))
        return

    _format_rich(results)


@main.command()
@click.argument(
    "doc_file",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
)
@click.option("--json", "output_json", is_flag=True, help="Output as JSON.")
@click.option(
    "--project",
    type=click.Path(exists=True, file_okay=False, path_type=Path),
    default=None,
    help="Project root (default: current directory).",
)
def refs(doc_file: Path, *, output_json: bool, project: Path | None) -> None:
    """List cross-references discovered in an XML documentation file."""
    from docloom.comments.model import build_comment
    from docloom.infrastructure.registry import ReferenceRegistry

    # References are only reported when see/seealso crefs are resolved.
    config = dataclasses.replace(_load_settings(project), preserve_raw_references=False)
    registry = ReferenceRegistry()
    for member in _read_members(doc_file):
        context = config.context_for(
            path=str(doc_file),
            name=member.name,
            start_line=member.line,
            on_reference_discovered=registry,
        )
        build_comment(member.xml, context)

    if output_json:
        data = [{"uid": uid, "count": count} for uid, count in registry.items()]
        click.echo(json.dumps(data, ensure_ascii=False, indent=2))
        return

    if not len(registry):
        click.echo("No references found.")
        return
    for uid, count in registry.items():
        click.echo(f"{uid}\t{count}")


@main.command("check-id")
@click.argument("candidates", nargs=-1, required=True)
def check_id(candidates: tuple[str, ...]) -> None:
    """Validate comment ids such as ``T:System.String``."""
    from docloom.comments.comment_id import classify

    invalid = 0
    for candidate in candidates:
        comment_id = classify(candidate)
        if comment_id is None:
            click.echo(f"[invalid] {candidate}")
            invalid += 1
        else:
            click.echo(f"[{comment_id.kind.name.lower()}] {comment_id.identifier}")

    if invalid:
        sys.exit(1)
