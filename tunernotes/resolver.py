"""EnharmonicResolver: picks the spelling and octave used to print a note."""

import logging
from typing import Final

from tunernotes.note_models import (
    BaseNote,
    MusicalNote,
    NoteModifier,
    NoteNameStem,
    NotePrintOption,
    NoteSubstrings,
)
from tunernotes.override_table import DEFAULT_OVERRIDES, OverrideTable
from tunernotes.strings import StringCatalog

logger = logging.getLogger(__name__)

BASE_NOTE_KEYS: Final[dict[BaseNote, str]] = {
    BaseNote.C: "c_note_name",
    BaseNote.D: "d_note_name",
    BaseNote.E: "e_note_name",
    BaseNote.F: "f_note_name",
    BaseNote.G: "g_note_name",
    BaseNote.A: "a_note_name",
    BaseNote.B: "b_note_name",
}

MODIFIER_GLYPHS: Final[dict[NoteModifier, str]] = {
    NoteModifier.NONE: "",
    NoteModifier.SHARP: "♯",
    NoteModifier.FLAT: "♭",
}

# Modifier an enharmonic spelling must carry to satisfy each print option
_PREFERRED_MODIFIER: Final[dict[NotePrintOption, NoteModifier]] = {
    NotePrintOption.PREFER_FLAT: NoteModifier.FLAT,
    NotePrintOption.PREFER_SHARP: NoteModifier.SHARP,
}


class EnharmonicResolver:
    """
    Resolves a MusicalNote into the text and octave index to display.

    Resolution order
    ----------------
    1. **Override** – If the note's enharmonic pair has a combined name in the
       active language (e.g. German "B" for A♯/B♭), that name is used as is,
       with the note's own octave. The print option is ignored.

    2. **Preferred enharmonic** – Otherwise, if the note has an alternative
       spelling whose modifier is the one the print option asks for, the
       alternative is used and its octave offset applied.

    3. **Primary** – Otherwise the primary spelling and octave are kept.

    A note without an octave stays without one in every branch.
    """

    def __init__(
        self,
        catalog: StringCatalog,
        overrides: OverrideTable = DEFAULT_OVERRIDES,
    ) -> None:
        self.catalog = catalog
        self.overrides = overrides

    # ------------------------------------------------------------------
    # Private helpers
    # ------------------------------------------------------------------

    def _spelling_text(self, base: BaseNote, modifier: NoteModifier) -> str:
        return self.catalog.get_string(BASE_NOTE_KEYS[base]) + MODIFIER_GLYPHS[modifier]

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def choose_spelling(
        self, note: MusicalNote, option: NotePrintOption = NotePrintOption.DEFAULT
    ) -> tuple[BaseNote, NoteModifier, int | None]:
        """
        Pick primary or enharmonic spelling, ignoring overrides.

        Returns:
            (base, modifier, octave) of the chosen spelling.
        """
        wanted = _PREFERRED_MODIFIER.get(option)
        if wanted is not None and note.has_enharmonic and note.enharmonic_modifier is wanted:
            octave = note.octave
            if octave is not None:
                octave += note.enharmonic_octave_offset
            logger.debug("Using enharmonic spelling of %s for %s", note, option.value)
            return note.enharmonic_base, note.enharmonic_modifier, octave
        return note.base, note.modifier, note.octave

    def resolve(
        self, note: MusicalNote, option: NotePrintOption = NotePrintOption.DEFAULT
    ) -> NoteSubstrings:
        """
        Resolve *note* into its printable substrings.

        Args:
            note:   The note to print.
            option: Which enharmonic spelling to favour when no override applies.

        Returns:
            NoteSubstrings with the note text and the octave index (None for no octave).
        """
        special_name = self.overrides.resolve_name(NoteNameStem.from_musical_note(note), self.catalog)
        if special_name is not None:
            return NoteSubstrings(note=special_name, octave_index=note.octave)

        base, modifier, octave = self.choose_spelling(note, option)
        return NoteSubstrings(note=self._spelling_text(base, modifier), octave_index=octave)
