"""NoteTextFormatter: composes the display text of a note."""

from tunernotes.note_models import FormattedNote, MusicalNote, NotePrintOption, OctaveSpan
from tunernotes.resolver import EnharmonicResolver
from tunernotes.strings import StringCatalog, get_catalog


class NoteTextFormatter:
    """
    Turns a MusicalNote into display text such as ``C♯4`` or ``B♭``.

    The formatter does no styling of its own. With ``styled=True`` it reports
    where the octave digits sit in the text so that the presentation layer
    can draw them as a small superscript.
    """

    def __init__(self, resolver: EnharmonicResolver) -> None:
        self.resolver = resolver

    def format(
        self,
        note: MusicalNote,
        option: NotePrintOption = NotePrintOption.DEFAULT,
        include_octave: bool = True,
        styled: bool = False,
    ) -> FormattedNote:
        """
        Compose the text for *note*.

        Args:
            note:           The note to print.
            option:         Enharmonic preference passed to the resolver.
            include_octave: Append the octave index if the note has one.
            styled:         Also return the span of the octave digits.

        Returns:
            FormattedNote; ``octave_span`` is None unless styled output has an octave.
        """
        substrings = self.resolver.resolve(note, option)

        if not include_octave or substrings.octave_index is None:
            return FormattedNote(text=substrings.note)

        octave = substrings.octave
        text = substrings.note + octave
        span = OctaveSpan(start=len(substrings.note), length=len(octave)) if styled else None
        return FormattedNote(text=text, octave_span=span)


def render(
    note: MusicalNote,
    preference: NotePrintOption = NotePrintOption.DEFAULT,
    include_octave: bool = True,
    styled: bool = False,
    catalog: StringCatalog | None = None,
) -> FormattedNote:
    """Render *note* with the given catalog (English when omitted)."""
    resolver = EnharmonicResolver(catalog if catalog is not None else get_catalog())
    return NoteTextFormatter(resolver).format(note, preference, include_octave, styled)
