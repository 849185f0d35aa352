"""Localized string catalogs keyed by symbolic identifiers."""

from typing import Final, Mapping

# Translations use these values to say "no text for this key in this language".
PLACEHOLDERS: Final[frozenset[str]] = frozenset({"", "-"})

_ENGLISH: Final[dict[str, str]] = {
    "c_note_name": "C",
    "d_note_name": "D",
    "e_note_name": "E",
    "f_note_name": "F",
    "g_note_name": "G",
    "a_note_name": "A",
    "b_note_name": "B",
    "asharp_bflat_note_name": "-",
    "tolerance_summary": "{0} cents",
    "samples": "samples",
    "minimum_frequency": "minimum frequency: ",
    "hertz": "{0:.1f} Hz",
    "seconds": "{0:.1f} s",
    "max_noise_summary": "Maximum allowed noise: {0}%",
}

_GERMAN: Final[dict[str, str]] = {
    **_ENGLISH,
    "b_note_name": "H",
    "asharp_bflat_note_name": "B",
    "tolerance_summary": "{0} Cent",
    "samples": "Samples",
    "minimum_frequency": "minimale Frequenz: ",
    "max_noise_summary": "Maximal erlaubtes Rauschen: {0}%",
}


def is_placeholder(text: str | None) -> bool:
    """True when a looked-up string means "no translation provided"."""
    return text is None or text in PLACEHOLDERS


class StringCatalog:
    """
    Read-only lookup from symbolic keys to strings of one language.

    Usage:

        catalog = get_catalog("de")
        catalog.get_string("b_note_name")          # "H"
        catalog.get_string("tolerance_summary", 5)  # "5 Cent"
    """

    def __init__(self, language: str, strings: Mapping[str, str]) -> None:
        self.language = language
        self._strings = dict(strings)

    def get_string(self, key: str, *args: object) -> str:
        """
        Return the string for *key*, formatted with *args* when given.

        Raises:
            KeyError: If the catalog has no entry for *key*.
        """
        try:
            text = self._strings[key]
        except KeyError:
            raise KeyError(f"No string '{key}' for language '{self.language}'") from None
        return text.format(*args) if args else text


_CATALOGS: Final[dict[str, StringCatalog]] = {
    "en": StringCatalog("en", _ENGLISH),
    "de": StringCatalog("de", _GERMAN),
}

DEFAULT_LANGUAGE: Final[str] = "en"


def available_languages() -> list[str]:
    return sorted(_CATALOGS)


def get_catalog(language: str = DEFAULT_LANGUAGE) -> StringCatalog:
    """
    Return the bundled catalog for *language*.

    Raises:
        KeyError: If no catalog is bundled for *language*.
    """
    try:
        return _CATALOGS[language.strip().lower()]
    except KeyError:
        supported = ", ".join(available_languages())
        raise KeyError(f"Unsupported language '{language}'. Use one of: {supported}.") from None
