"""
Tests for the static catalogs, calculator modes and copy helpers.
"""

import dataclasses
from typing import get_args

import pytest

from tempo_app.core.clipboard import COPY_BLOCKED_MESSAGE, clipboard_text, copy_status_message
from tempo_app.core.notation import (
    MODE_PRESETS,
    NOTE_DIVISIONS,
    REVERB_SIZE_PRESETS,
    CalculatorMode,
    NoteDivision,
    get_mode_config,
)


class TestCatalogs:
    def test_note_division_order(self):
        assert [n.id for n in NOTE_DIVISIONS] == [
            "1/1", "1/2", "1/4", "1/8", "1/16", "1/32", "1/64", "1/128", "1/256",
        ]

    def test_each_division_halves_the_previous(self):
        values = [n.beat_value for n in NOTE_DIVISIONS]
        assert values[0] == 4
        for prev, cur in zip(values, values[1:]):
            assert cur == prev / 2

    def test_catalog_is_immutable(self):
        with pytest.raises(dataclasses.FrozenInstanceError):
            NOTE_DIVISIONS[0].beat_value = 1
        assert isinstance(NOTE_DIVISIONS, tuple)
        assert isinstance(REVERB_SIZE_PRESETS, tuple)

    def test_beat_value_must_be_positive(self):
        with pytest.raises(ValueError):
            NoteDivision("bad", "bad", 0, "zero")

    def test_reverb_presets_shrink(self):
        totals = [p.total_beats for p in REVERB_SIZE_PRESETS]
        assert totals == sorted(totals, reverse=True)


class TestModes:
    def test_modes_cover_every_literal_member(self):
        assert set(MODE_PRESETS) == set(get_args(CalculatorMode))

    def test_mode_order_and_names(self):
        assert [(m.id, m.name) for m in MODE_PRESETS.values()] == [
            ("delay", "Delay"),
            ("reverb", "Reverb / Pre-Delay"),
            ("lfo", "LFO"),
        ]

    def test_mode_divisions_exist(self):
        ids = {n.id for n in NOTE_DIVISIONS}
        for mode in MODE_PRESETS.values():
            assert set(mode.division_ids) <= ids

    def test_unknown_mode(self):
        with pytest.raises(KeyError):
            get_mode_config("chorus")


class TestClipboard:
    def test_clipboard_text(self):
        assert clipboard_text(500, "ms") == "500.00 ms"
        assert clipboard_text(2, "hz") == "2.00 Hz"

    def test_status_message(self):
        assert copy_status_message("1/4 (1 Beat) delay normal", True) == "1/4 (1 Beat) delay normal copied"
        assert copy_status_message("Hall decay", False) == COPY_BLOCKED_MESSAGE
