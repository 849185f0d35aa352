"""Conversions from preference slider positions to physical quantities."""

from enum import Enum
from typing import Final

from tunernotes.errors import InvalidSettingIndexError, MissingPreferenceError
from tunernotes.strings import StringCatalog

DEFAULT_SAMPLE_RATE = 44100  # Hz

# Hand-picked tolerance steps in cents, one per slider position
TOLERANCE_STEPS: Final[dict[int, int]] = {0: 1, 1: 2, 2: 3, 3: 5, 4: 7, 5: 10, 6: 15, 7: 20}

PITCH_HISTORY_DURATION_AT_FULL_SCALE = 10.0  # seconds shown at slider position 100
MAX_PERCENT = 100


class SettingKind(Enum):
    """Slider-backed preferences with a physical value."""

    WINDOW_SIZE = "window_size"
    TOLERANCE = "tolerance_in_cents"
    PITCH_HISTORY_DURATION = "pitch_history_duration"
    MAX_NOISE = "max_noise"


def _check_index(kind: SettingKind, index: int, upper: int | None = None) -> None:
    # bool is an int subclass but never a slider position
    if isinstance(index, bool) or not isinstance(index, int):
        raise InvalidSettingIndexError(kind.value, index)
    if index < 0 or (upper is not None and index > upper):
        raise InvalidSettingIndexError(kind.value, index)


def index_to_window_size(index: int) -> int:
    """Analysis window length in samples: 128, 256, 512, ... for index 0, 1, 2, ..."""
    _check_index(SettingKind.WINDOW_SIZE, index)
    return round(2.0 ** (7 + index))


def index_to_tolerance(index: int) -> int:
    """
    Tolerance in cents for a slider position.

    Raises:
        InvalidSettingIndexError: If *index* is not one of the slider positions 0-7.
    """
    _check_index(SettingKind.TOLERANCE, index, max(TOLERANCE_STEPS))
    return TOLERANCE_STEPS[index]


def percent_to_pitch_history_duration(percent: int) -> float:
    """Length of the visible pitch history in seconds."""
    _check_index(SettingKind.PITCH_HISTORY_DURATION, percent, MAX_PERCENT)
    return PITCH_HISTORY_DURATION_AT_FULL_SCALE * percent / MAX_PERCENT


def percent_to_max_noise(percent: int) -> float:
    """Largest accepted noise level as a fraction of the signal."""
    _check_index(SettingKind.MAX_NOISE, percent, MAX_PERCENT)
    return percent / MAX_PERCENT


_CONVERTERS = {
    SettingKind.WINDOW_SIZE: index_to_window_size,
    SettingKind.TOLERANCE: index_to_tolerance,
    SettingKind.PITCH_HISTORY_DURATION: percent_to_pitch_history_duration,
    SettingKind.MAX_NOISE: percent_to_max_noise,
}


def index_to_physical_value(kind: SettingKind, index: int) -> int | float:
    """Convert a slider position of the *kind* control into its physical value."""
    return _CONVERTERS[kind](index)


def setting_kind_from_key(key: str) -> SettingKind:
    """
    Look up the setting behind a preference key such as ``"window_size"``.

    Raises:
        MissingPreferenceError: If no slider preference uses *key*.
    """
    try:
        return SettingKind(key)
    except ValueError:
        raise MissingPreferenceError(key) from None


def setting_summary(
    kind: SettingKind,
    index: int,
    catalog: StringCatalog,
    sample_rate: int = DEFAULT_SAMPLE_RATE,
) -> str:
    """Summary line shown below a slider, e.g. ``"4096 samples (minimum frequency: 21.5 Hz)"``."""
    value = index_to_physical_value(kind, index)
    if kind is SettingKind.WINDOW_SIZE:
        # A single period inside the window is not enough for a reliable
        # frequency estimate, hence two.
        min_frequency = 2 * sample_rate / value
        return (
            f"{value} {catalog.get_string('samples')} ("
            f"{catalog.get_string('minimum_frequency')}{catalog.get_string('hertz', min_frequency)})"
        )
    if kind is SettingKind.TOLERANCE:
        return catalog.get_string("tolerance_summary", value)
    if kind is SettingKind.PITCH_HISTORY_DURATION:
        return catalog.get_string("seconds", value)
    return catalog.get_string("max_noise_summary", index)
