import logging
from pathlib import Path
from typing import Optional

import typer
from banner_formatter.commands import CommandRegistry, MultiLineBannerCommand, SingleLineBannerCommand
from banner_formatter.editor import InMemoryEditor
from banner_formatter.engine import BannerFormatter
from banner_formatter.languages import language_for_path
from banner_formatter.models import Position, Selection
from banner_formatter.resolver import resolve_language

from .config import BannerConfig
from .converters import descriptor_to_model, tokens_to_entry
from .models import BannerOutput

app = typer.Typer(help="Banner Comments - insert separator and header comments in any language")

CONFIG_OPTION = typer.Option(Path(".banner.toml"), "--config", help="Path to config file")
VERBOSE_OPTION = typer.Option(False, "--verbose", "-v", help="Enable debug logging")


def _setup(config_file: Path, verbose: bool) -> BannerConfig:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s: %(message)s",
    )
    return BannerConfig(config_file)


def _resolve_or_exit(config: BannerConfig, language: str):
    descriptor = resolve_language(config.build_source(), language)
    if descriptor is None:
        typer.echo(f"Error: no comment syntax known for language '{language}'", err=True)
        raise typer.Exit(code=1)
    return descriptor


@app.command()
def line(
    language: str = typer.Argument(..., help="Language id (e.g. python, cpp, css)"),
    column: int = typer.Option(0, min=0, help="0-based column the banner starts at"),
    text: str = typer.Option("", help="Text to embed in the banner"),
    json_out: bool = typer.Option(False, "--json", help="Print JSON instead of the banner"),
    config_file: Path = CONFIG_OPTION,
    verbose: bool = VERBOSE_OPTION,
):
    """Print a single-line banner"""
    config = _setup(config_file, verbose)
    descriptor = _resolve_or_exit(config, language)
    banner = BannerFormatter(config.formatter_config()).format_line(descriptor, column, text)

    if json_out:
        output = BannerOutput(language_id=language, mode="line", column=column, text=text.strip(), banner=banner)
        typer.echo(output.model_dump_json(indent=2))
    else:
        typer.echo(" " * column + banner)


@app.command()
def block(
    language: str = typer.Argument(..., help="Language id (e.g. python, cpp, css)"),
    column: int = typer.Option(0, min=0, help="0-based column the banner starts at"),
    text: str = typer.Option("", help="Text for the header line"),
    json_out: bool = typer.Option(False, "--json", help="Print JSON instead of the banner"),
    config_file: Path = CONFIG_OPTION,
    verbose: bool = VERBOSE_OPTION,
):
    """Print a multi-line banner (header block plus separator line)"""
    config = _setup(config_file, verbose)
    descriptor = _resolve_or_exit(config, language)
    banner = BannerFormatter(config.formatter_config()).format_multi(descriptor, column, text)

    if json_out:
        output = BannerOutput(language_id=language, mode="block", column=column, text=text.strip(), banner=banner)
        typer.echo(output.model_dump_json(indent=2))
    else:
        typer.echo(" " * column + banner)


@app.command()
def insert(
    file: Path = typer.Argument(..., exists=True, dir_okay=False, help="File to edit"),
    line_number: int = typer.Option(..., "--line", min=1, help="1-based line to put the banner on"),
    column: int = typer.Option(0, min=0, help="0-based cursor column (used on blank lines)"),
    select_to: Optional[int] = typer.Option(
        None, "--select-to", min=0, help="Select from --column to this column and embed the selection"
    ),
    text: Optional[str] = typer.Option(None, help="Text to embed instead of the selection or line content"),
    multi: bool = typer.Option(False, "--multi", help="Insert a multi-line banner"),
    language: Optional[str] = typer.Option(None, help="Language id (inferred from the file name if omitted)"),
    dry_run: bool = typer.Option(False, "--dry-run", help="Print the result instead of writing the file"),
    config_file: Path = CONFIG_OPTION,
    verbose: bool = VERBOSE_OPTION,
):
    """Insert a banner into a file, as the editor commands would"""
    config = _setup(config_file, verbose)

    language_id = language or language_for_path(file)
    if not language_id:
        typer.echo(f"Error: cannot infer the language of {file.name}; pass --language", err=True)
        raise typer.Exit(code=1)

    cursor = Position(line_number - 1, column)
    anchor = Position(line_number - 1, select_to) if select_to is not None else cursor
    editor = InMemoryEditor(
        file.read_bytes().decode("utf-8"), language_id, Selection(anchor=anchor, active=cursor)
    )

    registry = CommandRegistry(
        config.build_source(),
        BannerFormatter(config.formatter_config()),
        reporter=lambda message: typer.echo(f"Error: {message}", err=True),
    )
    name = MultiLineBannerCommand.name if multi else SingleLineBannerCommand.name
    result = registry.execute(name, editor, text)
    if not result.inserted:
        raise typer.Exit(code=1)

    if dry_run:
        typer.echo(editor.text, nl=False)
    else:
        # Bytes keep the document's own line endings
        file.write_bytes(editor.text.encode("utf-8"))
        typer.echo(f"Inserted banner in {file} (cursor at {result.cursor.line + 1}:{result.cursor.character})")


@app.command()
def languages(
    config_file: Path = CONFIG_OPTION,
    verbose: bool = VERBOSE_OPTION,
):
    """List known languages and their comment tokens"""
    config = _setup(config_file, verbose)
    source = config.build_source()

    for language_id in source.languages():
        tokens = source.lookup(language_id)
        if tokens is None:
            continue
        entry = tokens_to_entry(language_id, tokens)
        if entry.line_token:
            typer.echo(f"{entry.language_id:<20} {entry.line_token}")
        else:
            typer.echo(f"{entry.language_id:<20} {entry.block_start} {entry.block_end}")


@app.command()
def describe(
    language: str = typer.Argument(..., help="Language id"),
    config_file: Path = CONFIG_OPTION,
    verbose: bool = VERBOSE_OPTION,
):
    """Show the resolved comment descriptor for a language"""
    config = _setup(config_file, verbose)
    descriptor = _resolve_or_exit(config, language)
    typer.echo(descriptor_to_model(language, descriptor).model_dump_json(indent=2))


if __name__ == "__main__":
    app()
