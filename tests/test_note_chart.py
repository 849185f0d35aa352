"""Unit tests for NoteChartExporter."""

import json
from pathlib import Path

import pytest

from tunernotes.note_chart import NoteChartExporter
from tunernotes.note_models import NotePrintOption
from tunernotes.strings import get_catalog


def test_unsupported_format_rejected() -> None:
    with pytest.raises(ValueError, match="Unsupported output format"):
        NoteChartExporter(get_catalog("en"), output_format="pdf")


def test_empty_range_rejected() -> None:
    exporter = NoteChartExporter(get_catalog("en"))
    with pytest.raises(ValueError):
        exporter.build_content(5, 4)


def test_html_has_one_row_per_octave() -> None:
    html = NoteChartExporter(get_catalog("en")).build_content(3, 5)
    assert html.startswith("<!DOCTYPE html>")
    assert html.count("<tr>") == 3
    assert 'C♯<sup class="octave">4</sup>' in html


def test_html_language_attribute() -> None:
    html = NoteChartExporter(get_catalog("de")).build_content(4, 4)
    assert '<html lang="de">' in html
    assert 'H<sup class="octave">4</sup>' in html


def test_json_lines_prefer_flat(tmp_path: Path) -> None:
    out = tmp_path / "chart.json"
    exporter = NoteChartExporter(get_catalog("en"), NotePrintOption.PREFER_FLAT, "json")
    exporter.export(str(out), 4, 4)

    lines = out.read_text(encoding="utf-8").splitlines()
    assert len(lines) == 12
    texts = [json.loads(line)["text"] for line in lines]
    assert texts[1] == "D♭4"
    assert texts[11] == "C♭5"


def test_rows_place_pitch_classes_in_their_octave() -> None:
    exporter = NoteChartExporter(get_catalog("en"), NotePrintOption.PREFER_SHARP, "json")
    assert all(note.octave is None for note in exporter.pitch_classes)

    lines = exporter.build_content(3, 4).splitlines()
    texts = [json.loads(line)["text"] for line in lines]
    assert texts[0] == "B♯2"
    assert texts[12] == "B♯3"
    assert texts[13] == "C♯4"
