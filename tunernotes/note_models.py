"""Data models for note identities and their rendered text."""

from dataclasses import dataclass, replace
from enum import Enum


class BaseNote(Enum):
    """Note letter. ``NONE`` marks a missing enharmonic letter and is never rendered."""

    C = "C"
    D = "D"
    E = "E"
    F = "F"
    G = "G"
    A = "A"
    B = "B"
    NONE = "none"


class NoteModifier(Enum):
    """Accidental applied to a base letter."""

    NONE = "none"
    SHARP = "sharp"
    FLAT = "flat"


class NotePrintOption(Enum):
    """Per-render request for which enharmonic spelling to favour."""

    DEFAULT = "default"
    PREFER_FLAT = "prefer-flat"
    PREFER_SHARP = "prefer-sharp"


# Canonical ordering used to normalize unordered spelling pairs
_BASE_ORDER: list[BaseNote] = list(BaseNote)
_MODIFIER_ORDER: list[NoteModifier] = list(NoteModifier)


def _spelling_key(base: BaseNote, modifier: NoteModifier) -> tuple[int, int]:
    return _BASE_ORDER.index(base), _MODIFIER_ORDER.index(modifier)


@dataclass(frozen=True)
class MusicalNote:
    """
    An abstract note as produced by a note-naming scheme.

    Attributes:
        base:                     Primary letter.
        modifier:                 Primary accidental.
        octave:                   Octave number, or None when the note carries no octave.
        enharmonic_base:          Letter of the alternative spelling, BaseNote.NONE if none exists.
        enharmonic_modifier:      Accidental of the alternative spelling.
        enharmonic_octave_offset: Added to ``octave`` when the alternative spelling is used
                                  (B♯3 and C4 are the same pitch, so C carries -1).
    """

    base: BaseNote
    modifier: NoteModifier = NoteModifier.NONE
    octave: int | None = None
    enharmonic_base: BaseNote = BaseNote.NONE
    enharmonic_modifier: NoteModifier = NoteModifier.NONE
    enharmonic_octave_offset: int = 0

    def __post_init__(self) -> None:
        if self.base is BaseNote.NONE:
            raise ValueError("A musical note needs a base letter.")

    @property
    def has_enharmonic(self) -> bool:
        return self.enharmonic_base is not BaseNote.NONE

    def with_octave(self, octave: int | None) -> "MusicalNote":
        """Return the same note spelled in another octave."""
        return replace(self, octave=octave)


@dataclass(frozen=True)
class NoteNameStem:
    """Octave-free identity of a note and its enharmonic alternative."""

    base: BaseNote
    modifier: NoteModifier
    enharmonic_base: BaseNote
    enharmonic_modifier: NoteModifier

    @classmethod
    def from_musical_note(cls, note: MusicalNote) -> "NoteNameStem":
        return cls(note.base, note.modifier, note.enharmonic_base, note.enharmonic_modifier)

    def normalized(self) -> "NoteNameStem":
        """Return the stem with its two spellings in canonical order."""
        primary = _spelling_key(self.base, self.modifier)
        alternative = _spelling_key(self.enharmonic_base, self.enharmonic_modifier)
        if primary <= alternative:
            return self
        return NoteNameStem(
            self.enharmonic_base, self.enharmonic_modifier, self.base, self.modifier
        )


@dataclass(frozen=True)
class NoteSubstrings:
    """Resolved note text (e.g. ``C♯``) and its octave index, kept apart."""

    note: str
    octave_index: int | None

    @property
    def octave(self) -> str:
        return "" if self.octave_index is None else str(self.octave_index)


@dataclass(frozen=True)
class OctaveSpan:
    """Position of the octave digits inside a composed note text."""

    start: int
    length: int

    @property
    def end(self) -> int:
        return self.start + self.length


@dataclass(frozen=True)
class FormattedNote:
    """
    Final display text of a note.

    ``octave_span`` is set only for styled output with an octave; presentation
    layers render that span smaller/raised.
    """

    text: str
    octave_span: OctaveSpan | None = None
