"""Field commands: decode, encode and inspect Anki note fields."""

import asyncio
import json

import typer
from pydantic import TypeAdapter, ValidationError
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from autoanki.exceptions import AutoankiNoteFromAnkiError, FieldParseError
from autoanki.sync import Note, decode_note_field, encode_note_field
from autoanki.sync.decoding import parse_field_tree

console = Console()

_NOTE = TypeAdapter(Note)


def _changed(flag: bool) -> str:
    return "[yellow]changed[/yellow]" if flag else "[green]unchanged[/green]"


def decode(
    field_file: typer.FileText = typer.Argument(
        ..., help="File holding the field content ('-' for stdin)"
    ),
    field_name: str = typer.Option("Front", "--field-name", help="Name of the field"),
    as_json: bool = typer.Option(False, "--json", help="Print the record as JSON"),
):
    """Decode a field and report its content, metadata and edit status."""
    text = field_file.read()
    try:
        decoded = asyncio.run(decode_note_field(field_name, text))
    except AutoankiNoteFromAnkiError as e:
        console.print(f"[bold red]Error:[/bold red] {escape(str(e))}")
        raise typer.Exit(1)

    if as_json:
        typer.echo(json.dumps(decoded.to_dict(), indent=2))
        return

    table = Table("Field", "Value")
    table.add_row("UUID", escape(decoded.uuid))
    table.add_row("Note type", escape(decoded.model_name))
    table.add_row("Tags", escape(decoded.tags))
    for label, region in (
        ("Source", decoded.source_content),
        ("Final", decoded.final_content),
    ):
        table.add_row(f"{label} content", escape(region.content))
        table.add_row(f"{label} hash (stored)", region.stored_hash)
        table.add_row(f"{label} hash (computed)", region.computed_hash)
        table.add_row(f"{label} status", _changed(region.field_changed))
    table.add_row("Style files", escape(", ".join(decoded.style_media_files)))
    table.add_row("Script files", escape(", ".join(decoded.script_media_files)))
    console.print(table)


def encode(
    note_file: typer.FileText = typer.Argument(
        ..., help="JSON file describing the note ('-' for stdin)"
    ),
    source: typer.FileText = typer.Option(
        ..., "--source", help="File with the field's source content"
    ),
    final: typer.FileText = typer.Option(
        ..., "--final", help="File with the field's final (rendered) content"
    ),
):
    """Print the field text Autoanki would store in Anki."""
    try:
        note = _NOTE.validate_json(note_file.read())
    except ValidationError as e:
        console.print(f"[bold red]Error:[/bold red] invalid note: {escape(str(e))}")
        raise typer.Exit(1)
    if note.uuid is None:
        console.print("[bold red]Error:[/bold red] note has no uuid")
        raise typer.Exit(1)

    typer.echo(asyncio.run(encode_note_field(note, final.read(), source.read())))


def tree(
    field_file: typer.FileText = typer.Argument(
        ..., help="File holding the field content ('-' for stdin)"
    ),
    field_name: str = typer.Option("Front", "--field-name", help="Name of the field"),
):
    """Parse a field the way the decoder does and print the tree as JSON."""
    try:
        parsed = parse_field_tree(field_name, field_file.read())
    except FieldParseError as e:
        console.print(f"[bold red]Error:[/bold red] {escape(str(e))}")
        raise typer.Exit(1)
    typer.echo(json.dumps(parsed, indent=1))
