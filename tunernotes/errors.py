"""Exception types raised on contract violations."""


class TunerNotesError(Exception):
    """Base class for all tunernotes errors."""


class InvalidSettingIndexError(TunerNotesError, ValueError):
    """A slider index outside the fixed range of its control."""

    def __init__(self, kind: str, index: object) -> None:
        super().__init__(f"Invalid index {index} for {kind}")
        self.kind = kind
        self.index = index


class MissingPreferenceError(TunerNotesError, KeyError):
    """A named preference that the settings screen expects does not exist."""

    def __init__(self, key: str) -> None:
        super().__init__(f"No {key} preference")
        self.key = key

    def __str__(self) -> str:
        # KeyError quotes its argument otherwise
        return str(self.args[0])


class NoteParseError(TunerNotesError, ValueError):
    """Text that cannot be read as a note name."""
