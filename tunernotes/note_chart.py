"""NoteChartExporter: writes the note names of an octave range to HTML or JSON."""

from __future__ import annotations

from typing import Final

from tunernotes.formatter import NoteTextFormatter
from tunernotes.note_markup import HtmlNoteRenderer, JsonNoteRenderer, NoteMarkupRenderer
from tunernotes.note_models import NotePrintOption
from tunernotes.note_parser import chromatic_notes
from tunernotes.resolver import EnharmonicResolver
from tunernotes.strings import StringCatalog

SUPPORTED_FORMATS: Final[set[str]] = {"html", "json"}


class NoteChartExporter:
    """
    Render all twelve pitch classes for each octave of a range.

    Supported formats:
    - ``html``: self-contained page with one table row per octave.
    - ``json``: one JSON object per note and line.
    """

    def __init__(
        self,
        catalog: StringCatalog,
        option: NotePrintOption = NotePrintOption.DEFAULT,
        output_format: str = "html",
    ) -> None:
        normalized = output_format.strip().lower()
        if normalized not in SUPPORTED_FORMATS:
            supported = ", ".join(sorted(SUPPORTED_FORMATS))
            raise ValueError(f"Unsupported output format '{output_format}'. Use one of: {supported}.")
        self.catalog = catalog
        self.option = option
        self.output_format = normalized
        self.formatter = NoteTextFormatter(EnharmonicResolver(catalog))
        self.renderer = self._build_renderer(normalized)
        self.pitch_classes = chromatic_notes()

    # ------------------------------------------------------------------
    # Private helpers
    # ------------------------------------------------------------------

    def _build_renderer(self, output_format: str) -> NoteMarkupRenderer:
        if output_format == "html":
            return HtmlNoteRenderer()
        return JsonNoteRenderer()

    def _render_row(self, octave: int) -> list[str]:
        return [
            self.renderer.render(
                self.formatter.format(note.with_octave(octave), self.option, styled=True)
            )
            for note in self.pitch_classes
        ]

    def build_html(self, rows: list[list[str]]) -> str:
        """Wrap rendered note cells in an HTML page, one table row per octave."""
        body = "\n".join(
            "    <tr>" + "".join(f"<td>{cell}</td>" for cell in row) + "</tr>" for row in rows
        )
        return f"""<!DOCTYPE html>
<html lang="{self.catalog.language}">
<head>
  <meta charset="UTF-8" />
  <title>Note names</title>
  <style>
    table {{ border-collapse: collapse; font-family: Georgia, serif; }}
    td {{ border: 1px solid #d8d8d8; padding: 0.4rem 0.8rem; text-align: center; }}
    sup.octave {{ font-size: 60%; }}
  </style>
</head>
<body>
  <table>
{body}
  </table>
</body>
</html>
"""

    def build_content(self, low: int, high: int) -> str:
        """
        Render the chart for octaves *low* to *high*, both included.

        Raises:
            ValueError: If the range is empty.
        """
        if low > high:
            raise ValueError(f"Lowest octave {low} is above highest octave {high}.")
        rows = [self._render_row(octave) for octave in range(low, high + 1)]
        if self.output_format == "html":
            return self.build_html(rows)
        return "".join(cell + "\n" for row in rows for cell in row)

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def export(self, output_path: str, low: int = 2, high: int = 6) -> None:
        """
        Write the chart to *output_path*.

        Raises:
            ValueError: If the octave range is empty.
            OSError: If the output file cannot be written.
        """
        content = self.build_content(low, high)
        with open(output_path, "w", encoding="utf-8") as fh:
            fh.write(content)
