"""Tests for chord progression scaffolding."""

import pytest

from chord_timeline.models import ChordQuality, Key, PitchClass
from chord_timeline.suggest import degree_chord, suggest_progression


class TestDegreeChord:
    """Triads on scale degrees."""

    @pytest.mark.parametrize(
        ("key", "degree", "minor", "expected"),
        [
            (Key.C, 1, False, "C"),
            (Key.C, 5, False, "G"),
            (Key.C, 6, True, "Am"),
            (Key.C, 4, False, "F"),
            (Key.G, 5, False, "D"),
            (Key.B_FLAT, 4, False, "D#"),
            (Key.E, 6, True, "C#m"),
        ],
    )
    def test_degrees(self, key: Key, degree: int, minor: bool, expected: str) -> None:
        assert degree_chord(key, degree, minor=minor).display == expected

    def test_degree_clamped(self) -> None:
        """Degrees outside 1-7 are clamped."""
        assert degree_chord(Key.C, 0).root is PitchClass.C
        assert degree_chord(Key.C, 9).root is PitchClass.B


class TestSuggestProgression:
    """Repeating I-V-vi-IV seeding."""

    def test_one_cycle(self) -> None:
        events = suggest_progression(Key.G, 8.0)
        assert [e.chord.display for e in events] == ["G", "D", "Em", "C"]
        assert [e.time for e in events] == [0.0, 2.0, 4.0, 6.0]

    def test_repeats(self) -> None:
        events = suggest_progression(Key.C, 10.0, spacing=1.0)
        assert len(events) == 10
        assert events[4].chord == events[0].chord
        assert events[6].chord.quality is ChordQuality.MINOR

    def test_stops_before_duration(self) -> None:
        events = suggest_progression(Key.C, 5.0)
        assert [e.time for e in events] == [0.0, 2.0, 4.0]

    def test_unique_ids(self) -> None:
        events = suggest_progression(Key.D, 20.0)
        assert len({e.id for e in events}) == len(events)

    @pytest.mark.parametrize("duration", [0.0, -1.0, float("nan")])
    def test_empty_for_no_duration(self, duration: float) -> None:
        assert suggest_progression(Key.C, duration) == ()

    def test_bad_spacing_raises(self) -> None:
        with pytest.raises(ValueError, match="spacing"):
            suggest_progression(Key.C, 10.0, spacing=0)

    def test_custom_progression(self) -> None:
        events = suggest_progression(Key.A, 4.0, progression=((2, True), (5, False)))
        assert [e.chord.display for e in events] == ["Bm", "E"]
