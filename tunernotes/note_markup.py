"""Renderer implementations that turn formatted notes into output markup."""

from __future__ import annotations

import json
from abc import ABC, abstractmethod
from dataclasses import asdict
from typing import Final

from tunernotes.note_models import FormattedNote


def _escape_html(text: str) -> str:
    """Escape the three characters that are unsafe in HTML text content."""
    return text.replace("&", "&amp;").replace("<", "&lt;").replace(">", "&gt;")


class NoteMarkupRenderer(ABC):
    """Abstract note renderer."""

    @property
    @abstractmethod
    def default_extension(self) -> str:
        """Default filename extension for this renderer."""

    @abstractmethod
    def render(self, formatted: FormattedNote) -> str:
        """Render one formatted note."""


class PlainTextRenderer(NoteMarkupRenderer):
    """Text as composed by the formatter, styling dropped."""

    @property
    def default_extension(self) -> str:
        return ".txt"

    def render(self, formatted: FormattedNote) -> str:
        return formatted.text


class HtmlNoteRenderer(NoteMarkupRenderer):
    """HTML fragment with the octave span wrapped in a small superscript."""

    @property
    def default_extension(self) -> str:
        return ".html"

    def render(self, formatted: FormattedNote) -> str:
        span = formatted.octave_span
        if span is None:
            return _escape_html(formatted.text)
        head = _escape_html(formatted.text[: span.start])
        octave = _escape_html(formatted.text[span.start : span.end])
        tail = _escape_html(formatted.text[span.end :])
        return f'{head}<sup class="octave">{octave}</sup>{tail}'


class JsonNoteRenderer(NoteMarkupRenderer):
    """Compact JSON object with the text and the octave span."""

    @property
    def default_extension(self) -> str:
        return ".json"

    def render(self, formatted: FormattedNote) -> str:
        return json.dumps(asdict(formatted), separators=(",", ":"), ensure_ascii=False)


_RENDERERS: Final[dict[str, type[NoteMarkupRenderer]]] = {
    "plain": PlainTextRenderer,
    "html": HtmlNoteRenderer,
    "json": JsonNoteRenderer,
}

SUPPORTED_MARKUPS: Final[list[str]] = sorted(_RENDERERS)


def get_markup_renderer(name: str) -> NoteMarkupRenderer:
    """
    Build the renderer registered under *name*.

    Raises:
        ValueError: If *name* is not a supported markup.
    """
    normalized = name.strip().lower()
    if normalized not in _RENDERERS:
        supported = ", ".join(SUPPORTED_MARKUPS)
        raise ValueError(f"Unsupported markup '{name}'. Use one of: {supported}.")
    return _RENDERERS[normalized]()
