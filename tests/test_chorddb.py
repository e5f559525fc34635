import logging

import pytest

from chordsheet.chorddb import KNOWN_CHORDS, UNKNOWN_CHORD, resolve_chord


# ---------------------------------------------------------------------------
# Built-in table
# ---------------------------------------------------------------------------


def test_known_chords_are_seven_values():
    for name, frets in KNOWN_CHORDS.items():
        assert len(frets) == 7, name
        assert all(v == -1 or 0 <= v <= 5 for v in frets), name


def test_known_chords_read_only():
    with pytest.raises(TypeError):
        KNOWN_CHORDS["C"] = (0, 0, 0, 0, 0, 0, 0)


def test_common_open_chords_present():
    assert KNOWN_CHORDS["Am"] == (0, -1, 0, 2, 2, 1, 0)
    assert KNOWN_CHORDS["G"] == (0, 3, 2, 0, 0, 0, 3)
    assert KNOWN_CHORDS["D"] == (0, -1, -1, 0, 2, 3, 2)


def test_unknown_placeholder_has_no_string_data():
    assert len(UNKNOWN_CHORD) == 7
    assert all(v is None for v in UNKNOWN_CHORD[1:])


# ---------------------------------------------------------------------------
# resolve_chord
# ---------------------------------------------------------------------------


def test_local_definition_wins():
    local = {"C": (3, -1, 1, 3, 3, 3, 1)}
    assert resolve_chord("C", local) == (3, -1, 1, 3, 3, 3, 1)


def test_falls_back_to_known():
    assert resolve_chord("Em", {}) == KNOWN_CHORDS["Em"]


def test_unknown_resolves_to_placeholder(caplog):
    with caplog.at_level(logging.WARNING):
        assert resolve_chord("H13", {}) == UNKNOWN_CHORD
    assert "H13" in caplog.text
