import pytest

from chord_timeline import ChordParseError, chord_event, parse_chord
from chord_timeline.converter import pychord_quality_to_display
from chord_timeline.models import ChordQuality, PitchClass


class TestQualityMapping:
    def test_major(self):
        assert pychord_quality_to_display("") == (ChordQuality.MAJOR, None)

    def test_minor(self):
        assert pychord_quality_to_display("m") == (ChordQuality.MINOR, None)

    def test_minor7(self):
        assert pychord_quality_to_display("m7") == (ChordQuality.MINOR, "7")

    def test_maj7_aliases(self):
        assert pychord_quality_to_display("maj7") == pychord_quality_to_display("M7")

    def test_sus4(self):
        assert pychord_quality_to_display("sus4") == (ChordQuality.SUS, "4")

    def test_half_diminished(self):
        assert pychord_quality_to_display("m7-5") == (ChordQuality.MINOR, "7b5")

    def test_unknown_quality_raises(self):
        with pytest.raises(ChordParseError, match="Unknown pychord quality"):
            pychord_quality_to_display("unknown_quality")


class TestParseChord:
    def test_simple_major(self):
        chord = parse_chord("C")
        assert chord.root is PitchClass.C
        assert chord.quality is ChordQuality.MAJOR
        assert chord.extension is None

    def test_minor_seventh(self):
        chord = parse_chord("Gm7")
        assert chord.root is PitchClass.G
        assert chord.quality is ChordQuality.MINOR
        assert chord.extension == "7"
        assert chord.display == "Gm7"

    def test_flat_root_normalized_to_sharp(self):
        chord = parse_chord("Bbm7")
        assert chord.root is PitchClass.A_SHARP
        assert chord.display == "A#m7"

    def test_sharp_root(self):
        chord = parse_chord("F#dim7")
        assert chord.root is PitchClass.F_SHARP
        assert chord.quality is ChordQuality.DIM
        assert chord.display == "F#dim7"

    def test_slash_chord(self):
        chord = parse_chord("C/E")
        assert chord.root is PitchClass.C
        assert chord.extension == "/E"
        assert chord.display == "C/E"

    def test_surrounding_whitespace(self):
        assert parse_chord("  Am ").display == "Am"

    @pytest.mark.parametrize(
        ("symbol", "expected"),
        [("Dsus4", "Dsus4"), ("Caug", "C+"), ("G7", "G7"), ("Cmaj7", "Cmaj7"), ("Cadd9", "Cadd9")],
    )
    def test_display_forms(self, symbol, expected):
        assert parse_chord(symbol).display == expected

    def test_empty_symbol_raises(self):
        with pytest.raises(ChordParseError, match="Empty chord symbol"):
            parse_chord("   ")

    def test_invalid_symbol_raises(self):
        with pytest.raises(ChordParseError):
            parse_chord("Hello")

    def test_parse_error_is_value_error(self):
        with pytest.raises(ValueError):
            parse_chord("Xm7")


class TestChordEvent:
    def test_builds_event(self):
        event = chord_event("Em", 3.5)
        assert event.chord.display == "Em"
        assert event.time == 3.5
        assert event.id
