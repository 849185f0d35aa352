"""Unit tests for OverrideTable."""

import pytest

from tunernotes.note_models import BaseNote, NoteModifier, NoteNameStem
from tunernotes.override_table import DEFAULT_OVERRIDES, OverrideTable
from tunernotes.strings import StringCatalog, get_catalog

B_FLAT_A_SHARP = NoteNameStem(BaseNote.B, NoteModifier.FLAT, BaseNote.A, NoteModifier.SHARP)
A_SHARP_B_FLAT = NoteNameStem(BaseNote.A, NoteModifier.SHARP, BaseNote.B, NoteModifier.FLAT)


def test_default_table_holds_single_entry() -> None:
    assert len(DEFAULT_OVERRIDES) == 1


def test_lookup_is_symmetric() -> None:
    assert DEFAULT_OVERRIDES.lookup(B_FLAT_A_SHARP) == "asharp_bflat_note_name"
    assert DEFAULT_OVERRIDES.lookup(A_SHARP_B_FLAT) == "asharp_bflat_note_name"


def test_lookup_missing_pair_returns_none() -> None:
    stem = NoteNameStem(BaseNote.C, NoteModifier.SHARP, BaseNote.D, NoteModifier.FLAT)
    assert DEFAULT_OVERRIDES.lookup(stem) is None


def test_normalized_orders_both_orientations_alike() -> None:
    assert B_FLAT_A_SHARP.normalized() == A_SHARP_B_FLAT.normalized()
    assert A_SHARP_B_FLAT.normalized() == A_SHARP_B_FLAT


def test_entries_in_both_orientations_collapse() -> None:
    table = OverrideTable([(B_FLAT_A_SHARP, "key"), (A_SHARP_B_FLAT, "key")])
    assert len(table) == 1


def test_conflicting_entries_rejected() -> None:
    with pytest.raises(ValueError, match="Conflicting"):
        OverrideTable([(B_FLAT_A_SHARP, "one"), (A_SHARP_B_FLAT, "two")])


def test_resolve_name_treats_placeholder_as_absent() -> None:
    assert DEFAULT_OVERRIDES.resolve_name(B_FLAT_A_SHARP, get_catalog("en")) is None


def test_resolve_name_returns_translation() -> None:
    assert DEFAULT_OVERRIDES.resolve_name(A_SHARP_B_FLAT, get_catalog("de")) == "B"


def test_resolve_name_treats_empty_string_as_absent() -> None:
    catalog = StringCatalog("xx", {"asharp_bflat_note_name": ""})
    assert DEFAULT_OVERRIDES.resolve_name(B_FLAT_A_SHARP, catalog) is None
