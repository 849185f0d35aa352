"""Unit tests for slider index conversions."""

import pytest

from tunernotes.errors import InvalidSettingIndexError, MissingPreferenceError
from tunernotes.setting_values import (
    SettingKind,
    index_to_physical_value,
    index_to_tolerance,
    index_to_window_size,
    percent_to_max_noise,
    percent_to_pitch_history_duration,
    setting_kind_from_key,
    setting_summary,
)
from tunernotes.strings import get_catalog


def test_window_size_doubles_from_128() -> None:
    assert [index_to_window_size(i) for i in range(5)] == [128, 256, 512, 1024, 2048]


def test_window_size_strictly_increasing() -> None:
    sizes = [index_to_window_size(i) for i in range(12)]
    assert all(a < b for a, b in zip(sizes, sizes[1:]))


def test_window_size_rejects_negative_index() -> None:
    with pytest.raises(InvalidSettingIndexError):
        index_to_window_size(-1)


def test_tolerance_table() -> None:
    assert index_to_tolerance(3) == 5
    assert index_to_tolerance(7) == 20
    assert [index_to_tolerance(i) for i in range(8)] == [1, 2, 3, 5, 7, 10, 15, 20]


@pytest.mark.parametrize("index", [-1, 8, 100])
def test_tolerance_out_of_range_raises(index: int) -> None:
    with pytest.raises(InvalidSettingIndexError) as excinfo:
        index_to_tolerance(index)
    assert excinfo.value.index == index
    assert isinstance(excinfo.value, ValueError)


def test_pitch_history_duration() -> None:
    assert percent_to_pitch_history_duration(0) == 0.0
    assert percent_to_pitch_history_duration(50) == pytest.approx(5.0)
    assert percent_to_pitch_history_duration(100) == pytest.approx(10.0)


def test_max_noise() -> None:
    assert percent_to_max_noise(10) == pytest.approx(0.1)
    with pytest.raises(InvalidSettingIndexError):
        percent_to_max_noise(101)


def test_index_to_physical_value_dispatches() -> None:
    assert index_to_physical_value(SettingKind.WINDOW_SIZE, 5) == 4096
    assert index_to_physical_value(SettingKind.TOLERANCE, 3) == 5
    with pytest.raises(InvalidSettingIndexError):
        index_to_physical_value(SettingKind.TOLERANCE, 8)


def test_setting_kind_from_key() -> None:
    assert setting_kind_from_key("tolerance_in_cents") is SettingKind.TOLERANCE
    with pytest.raises(MissingPreferenceError, match="No overlap preference"):
        setting_kind_from_key("overlap")


def test_window_size_summary_reports_minimum_frequency() -> None:
    summary = setting_summary(SettingKind.WINDOW_SIZE, 5, get_catalog("en"), sample_rate=44100)
    assert summary == "4096 samples (minimum frequency: 21.5 Hz)"


def test_tolerance_summary_localized() -> None:
    assert setting_summary(SettingKind.TOLERANCE, 3, get_catalog("en")) == "5 cents"
    assert setting_summary(SettingKind.TOLERANCE, 3, get_catalog("de")) == "5 Cent"


def test_duration_and_noise_summaries() -> None:
    catalog = get_catalog("en")
    assert setting_summary(SettingKind.PITCH_HISTORY_DURATION, 30, catalog) == "3.0 s"
    assert setting_summary(SettingKind.MAX_NOISE, 10, catalog) == "Maximum allowed noise: 10%"


@pytest.mark.parametrize("index", [True, False, 2.5, 3.0, "3", None])
@pytest.mark.parametrize("kind", list(SettingKind))
def test_non_integer_index_raises(kind: SettingKind, index: object) -> None:
    with pytest.raises(InvalidSettingIndexError):
        index_to_physical_value(kind, index)  # type: ignore[arg-type]


def test_bool_is_not_a_tolerance_position() -> None:
    with pytest.raises(InvalidSettingIndexError):
        index_to_tolerance(True)


def test_fractional_window_index_raises() -> None:
    with pytest.raises(InvalidSettingIndexError):
        index_to_window_size(2.5)  # type: ignore[arg-type]
