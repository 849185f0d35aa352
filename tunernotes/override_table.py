"""OverrideTable: combined names for enharmonic pairs that share one written form."""

import logging
from typing import Final, Iterable

from tunernotes.note_models import BaseNote, NoteModifier, NoteNameStem
from tunernotes.strings import StringCatalog, is_placeholder

logger = logging.getLogger(__name__)


class OverrideTable:
    """
    Mapping from an unordered enharmonic pair to a localized-name key.

    Entries are stored under the normalized stem, so ``(B♭, A♯)`` and
    ``(A♯, B♭)`` find the same key while the table holds a single entry.
    """

    def __init__(self, entries: Iterable[tuple[NoteNameStem, str]] = ()) -> None:
        self._entries: dict[NoteNameStem, str] = {}
        for stem, key in entries:
            normalized = stem.normalized()
            existing = self._entries.get(normalized)
            if existing is not None and existing != key:
                raise ValueError(
                    f"Conflicting override keys '{existing}' and '{key}' for {normalized}."
                )
            self._entries[normalized] = key

    def __len__(self) -> int:
        return len(self._entries)

    def lookup(self, stem: NoteNameStem) -> str | None:
        """Return the localized-name key for *stem*, or None if the pair has no override."""
        return self._entries.get(stem.normalized())

    def resolve_name(self, stem: NoteNameStem, catalog: StringCatalog) -> str | None:
        """
        Return the override text for *stem* in the catalog's language.

        A missing entry and an entry whose translation is a placeholder both
        give None; the caller falls back to the regular spelling either way.
        """
        key = self.lookup(stem)
        if key is None:
            return None
        name = catalog.get_string(key)
        if is_placeholder(name):
            logger.debug("Override '%s' has no text for language '%s'", key, catalog.language)
            return None
        return name


DEFAULT_OVERRIDES: Final[OverrideTable] = OverrideTable(
    [
        (
            NoteNameStem(BaseNote.B, NoteModifier.FLAT, BaseNote.A, NoteModifier.SHARP),
            "asharp_bflat_note_name",
        ),
    ]
)
