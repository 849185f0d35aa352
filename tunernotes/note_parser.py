"""Builds MusicalNote values from note names typed as text."""

import re
from typing import Final

from tunernotes.errors import NoteParseError
from tunernotes.note_models import BaseNote, MusicalNote, NoteModifier

_NOTE_PATTERN: Final[re.Pattern[str]] = re.compile(r"^\s*([A-Ga-g])([#♯b♭]?)(-?\d+)?\s*$")

_MODIFIER_SYMBOLS: Final[dict[str, NoteModifier]] = {
    "": NoteModifier.NONE,
    "#": NoteModifier.SHARP,
    "♯": NoteModifier.SHARP,
    "b": NoteModifier.FLAT,
    "♭": NoteModifier.FLAT,
}

_N, _S, _F = NoteModifier.NONE, NoteModifier.SHARP, NoteModifier.FLAT

#: 12-tone equal temperament alternatives: spelling -> (alternative, octave offset)
ENHARMONIC_TABLE: Final[dict[tuple[BaseNote, NoteModifier], tuple[BaseNote, NoteModifier, int]]] = {
    (BaseNote.C, _N): (BaseNote.B, _S, -1),
    (BaseNote.C, _S): (BaseNote.D, _F, 0),
    (BaseNote.C, _F): (BaseNote.B, _N, -1),
    (BaseNote.D, _F): (BaseNote.C, _S, 0),
    (BaseNote.D, _S): (BaseNote.E, _F, 0),
    (BaseNote.E, _F): (BaseNote.D, _S, 0),
    (BaseNote.E, _N): (BaseNote.F, _F, 0),
    (BaseNote.E, _S): (BaseNote.F, _N, 0),
    (BaseNote.F, _F): (BaseNote.E, _N, 0),
    (BaseNote.F, _N): (BaseNote.E, _S, 0),
    (BaseNote.F, _S): (BaseNote.G, _F, 0),
    (BaseNote.G, _F): (BaseNote.F, _S, 0),
    (BaseNote.G, _S): (BaseNote.A, _F, 0),
    (BaseNote.A, _F): (BaseNote.G, _S, 0),
    (BaseNote.A, _S): (BaseNote.B, _F, 0),
    (BaseNote.B, _F): (BaseNote.A, _S, 0),
    (BaseNote.B, _N): (BaseNote.C, _F, 1),
    (BaseNote.B, _S): (BaseNote.C, _N, 1),
}

#: Pitch classes C..B in their sharp spelling
CHROMATIC_SPELLINGS: Final[list[tuple[BaseNote, NoteModifier]]] = [
    (BaseNote.C, _N),
    (BaseNote.C, _S),
    (BaseNote.D, _N),
    (BaseNote.D, _S),
    (BaseNote.E, _N),
    (BaseNote.F, _N),
    (BaseNote.F, _S),
    (BaseNote.G, _N),
    (BaseNote.G, _S),
    (BaseNote.A, _N),
    (BaseNote.A, _S),
    (BaseNote.B, _N),
]


def make_note(base: BaseNote, modifier: NoteModifier, octave: int | None = None) -> MusicalNote:
    """Create a note with its 12-tone enharmonic alternative filled in."""
    alternative = ENHARMONIC_TABLE.get((base, modifier))
    if alternative is None:
        return MusicalNote(base=base, modifier=modifier, octave=octave)
    enharmonic_base, enharmonic_modifier, offset = alternative
    return MusicalNote(
        base=base,
        modifier=modifier,
        octave=octave,
        enharmonic_base=enharmonic_base,
        enharmonic_modifier=enharmonic_modifier,
        enharmonic_octave_offset=offset,
    )


def parse_note(text: str) -> MusicalNote:
    """
    Parse a note name such as ``"Bb3"``, ``"C#-1"`` or ``"f"``.

    The octave is optional; without it the note carries no octave.

    Raises:
        NoteParseError: If *text* is not a note name.
    """
    match = _NOTE_PATTERN.match(text)
    if not match:
        raise NoteParseError(f"Cannot read '{text}' as a note name (expected e.g. C4, F#3, Bb).")
    letter, symbol, octave = match.groups()
    return make_note(
        BaseNote(letter.upper()),
        _MODIFIER_SYMBOLS[symbol],
        int(octave) if octave is not None else None,
    )


def chromatic_notes(octave: int | None = None) -> list[MusicalNote]:
    """The twelve pitch classes of one octave, C first."""
    return [make_note(base, modifier, octave) for base, modifier in CHROMATIC_SPELLINGS]
