"""tunernotes CLI entry point."""

import sys
from typing import NoReturn

import click

from tunernotes import __version__
from tunernotes.errors import TunerNotesError
from tunernotes.formatter import NoteTextFormatter
from tunernotes.logging_config import configure_logging
from tunernotes.note_chart import NoteChartExporter
from tunernotes.note_markup import SUPPORTED_MARKUPS, get_markup_renderer
from tunernotes.note_models import NotePrintOption
from tunernotes.note_parser import parse_note
from tunernotes.resolver import EnharmonicResolver
from tunernotes.setting_values import (
    DEFAULT_SAMPLE_RATE,
    index_to_physical_value,
    setting_kind_from_key,
    setting_summary,
)
from tunernotes.strings import DEFAULT_LANGUAGE, available_languages, get_catalog

PREFERENCES: dict[str, NotePrintOption] = {
    "default": NotePrintOption.DEFAULT,
    "flat": NotePrintOption.PREFER_FLAT,
    "sharp": NotePrintOption.PREFER_SHARP,
}


def _fail(message: str) -> NoReturn:
    click.echo(f"  ERROR: {message}", err=True)
    sys.exit(1)


language_option = click.option(
    "--language",
    "-l",
    type=click.Choice(available_languages(), case_sensitive=False),
    envvar="TUNERNOTES_LANGUAGE",
    default=DEFAULT_LANGUAGE,
    show_default=True,
    show_envvar=True,
    help="Language of the note names.",
)

prefer_option = click.option(
    "--prefer",
    type=click.Choice(sorted(PREFERENCES), case_sensitive=False),
    envvar="TUNERNOTES_PRINT_OPTION",
    default="default",
    show_default=True,
    show_envvar=True,
    help="Favour flat or sharp spellings where the note has both.",
)


# ── CLI group ──────────────────────────────────────────────────────────────────

@click.group(context_settings={"help_option_names": ["-h", "--help"]})
@click.version_option(version=__version__, prog_name="tunernotes")
@click.option("--verbose", "-v", is_flag=True, help="Log resolution details to stderr.")
def main(verbose: bool) -> None:
    """tunernotes: note names, enharmonic spelling and tuner setting values."""
    configure_logging(verbose)


# ── render subcommand ──────────────────────────────────────────────────────────

@main.command()
@click.argument("notes", nargs=-1, required=True)
@prefer_option
@language_option
@click.option("--no-octave", is_flag=True, help="Leave out the octave index.")
@click.option(
    "--format",
    "output_format",
    type=click.Choice(SUPPORTED_MARKUPS, case_sensitive=False),
    default="plain",
    show_default=True,
    help="Output markup. html draws the octave as a superscript.",
)
def render(
    notes: tuple[str, ...],
    prefer: str,
    language: str,
    no_octave: bool,
    output_format: str,
) -> None:
    """
    Print the display name of each NOTE.

    NOTE is a letter with optional accidental and octave, e.g. C4, F#3, Bb.

    \b
    Examples:
      tunernotes render C4 --prefer sharp
      tunernotes render A#3 Bb3 --language de
      tunernotes render C#4 --format html
    """
    catalog = get_catalog(language)
    option = PREFERENCES[prefer.lower()]
    formatter = NoteTextFormatter(EnharmonicResolver(catalog))
    renderer = get_markup_renderer(output_format)

    for text in notes:
        try:
            note = parse_note(text)
        except TunerNotesError as exc:
            _fail(str(exc))
        formatted = formatter.format(note, option, include_octave=not no_octave, styled=True)
        click.echo(renderer.render(formatted))


# ── setting subcommand ─────────────────────────────────────────────────────────

@main.command()
@click.argument("key")
@click.argument("index", type=int)
@language_option
@click.option(
    "--sample-rate",
    type=click.IntRange(min=1),
    envvar="TUNERNOTES_SAMPLE_RATE",
    default=DEFAULT_SAMPLE_RATE,
    show_default=True,
    show_envvar=True,
    metavar="HZ",
    help="Sample rate used for the minimum frequency of window sizes.",
)
def setting(
    key: str,
    index: int,
    language: str,
    sample_rate: int,
) -> None:
    """
    Convert a slider position of preference KEY into its physical value.

    KEY is one of window_size, tolerance_in_cents, pitch_history_duration, max_noise.

    \b
    Examples:
      tunernotes setting window_size 5
      tunernotes setting tolerance_in_cents 3
    """
    catalog = get_catalog(language)
    try:
        kind = setting_kind_from_key(key)
        value = index_to_physical_value(kind, index)
        summary = setting_summary(kind, index, catalog, sample_rate)
    except TunerNotesError as exc:
        _fail(str(exc))

    click.echo(f"{kind.value}[{index}] = {value}")
    click.echo(f"  {summary}")


# ── chart subcommand ───────────────────────────────────────────────────────────

@main.command()
@click.option("--low", type=int, default=2, show_default=True, help="Lowest octave.")
@click.option("--high", type=int, default=6, show_default=True, help="Highest octave.")
@prefer_option
@language_option
@click.option(
    "--format",
    "output_format",
    type=click.Choice(["html", "json"], case_sensitive=False),
    default="html",
    show_default=True,
    help="Chart format: HTML table or JSON lines.",
)
@click.option(
    "--output",
    "-o",
    default=None,
    metavar="PATH",
    help="Destination file. Defaults to note_chart.<format>.",
)
def chart(
    low: int,
    high: int,
    prefer: str,
    language: str,
    output_format: str,
    output: str | None,
) -> None:
    """
    Write the names of all notes between two octaves to a file.

    \b
    Examples:
      tunernotes chart --low 3 --high 5
      tunernotes chart --prefer flat --language de -o chart.html
    """
    catalog = get_catalog(language)
    normalized_format = output_format.lower()
    resolved_output = output if output is not None else f"note_chart.{normalized_format}"

    exporter = NoteChartExporter(catalog, PREFERENCES[prefer.lower()], normalized_format)
    try:
        exporter.export(resolved_output, low, high)
    except OSError as exc:
        _fail(f"Could not write chart: {exc}")
    except ValueError as exc:
        _fail(str(exc))

    click.echo(f"Done!  Wrote octaves {low}-{high} to '{resolved_output}'.")
