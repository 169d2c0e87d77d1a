"""Tests for playhead lookup."""

import pytest

from chord_timeline.alignment import AlignedLine, AlignedToken, PlayheadIndex, align, current_token
from chord_timeline.converter import chord_event

DURATION = 6.0


@pytest.fixture
def lines() -> tuple[AlignedLine, ...]:
    events = [chord_event("G", 0.0), chord_event("C", 2.0), chord_event("D", 4.0)]
    return align("Amazing grace how sweet the sound", events, DURATION)


@pytest.fixture
def spacer_lines() -> tuple[AlignedLine, ...]:
    return (
        AlignedLine((AlignedToken("", None, 0.0, 2.0),)),
        AlignedLine((AlignedToken("x", "G", 2.0, 4.0),)),
    )


class TestCurrentToken:
    """Linear lookup in reading order."""

    def test_start(self, lines: tuple[AlignedLine, ...]) -> None:
        assert current_token(lines, 0.0).text == "Amazing"

    def test_boundary_picks_later_token(self, lines: tuple[AlignedLine, ...]) -> None:
        """At a shared boundary the token that starts there is current."""
        assert current_token(lines, 2.0).text == "how"

    def test_before_start(self, lines: tuple[AlignedLine, ...]) -> None:
        assert current_token(lines, -0.01) is None

    def test_at_and_after_duration(self, lines: tuple[AlignedLine, ...]) -> None:
        assert current_token(lines, DURATION, duration=DURATION) is None
        assert current_token(lines, DURATION + 1, duration=DURATION) is None
        assert current_token(lines, DURATION) is None

    def test_exactly_one_inside_span(self, lines: tuple[AlignedLine, ...]) -> None:
        for step in range(600):
            t = step / 100
            token = current_token(lines, t, duration=DURATION)
            assert token is not None
            matching = [tok for line in lines for tok in line.tokens if tok.contains(t)]
            assert matching == [token]

    def test_empty(self) -> None:
        assert current_token((), 1.0) is None

    def test_word_wins_over_blank_line(self) -> None:
        """A blank line shares its window with the next line; the word is highlighted."""
        events = [chord_event("G", 0.0), chord_event("C", 2.0)]
        lines = align("Hello\n\nworld", events, 4.0)
        assert lines[1].tokens[0].contains(3.0)
        assert current_token(lines, 3.0) is lines[2].tokens[0]

    def test_first_word_after_blank_line(self) -> None:
        events = [chord_event("G", 0.0), chord_event("C", 2.0), chord_event("D", 4.0), chord_event("Em", 6.0)]
        lines = align("Verse one\n\nVerse two", events, 8.0)
        for t in (4.0, 5.0, 5.99):
            token = current_token(lines, t)
            assert token is lines[2].tokens[0]
            assert (token.text, token.chord_above) == ("Verse", "D")
        assert current_token(lines, 6.0).text == "two"

    def test_trailing_blank_line(self) -> None:
        lines = align("Hello\n", [chord_event("G", 0.0)], 3.0)
        assert current_token(lines, 1.0) is lines[0].tokens[0]

    def test_spacer_without_word(self, spacer_lines: tuple[AlignedLine, ...]) -> None:
        """A spacer is still current where no word covers the time."""
        assert current_token(spacer_lines, 1.0) is spacer_lines[0].tokens[0]
        assert current_token(spacer_lines, 2.0).text == "x"

    def test_zero_duration_song(self) -> None:
        """Only a caller passing ``duration`` gets None at the end of the song."""
        lines = align("word", [], 0.0)
        assert current_token(lines, 0.0, duration=0.0) is None
        assert current_token(lines, 0.0).text == "word"


class TestPlayheadIndex:
    """Precomputed lookup agrees with the linear scan."""

    def test_agrees_with_current_token(self, lines: tuple[AlignedLine, ...]) -> None:
        index = PlayheadIndex(lines, duration=DURATION)
        for step in range(-10, 700):
            t = step / 100
            assert index.lookup(t) is current_token(lines, t, duration=DURATION)

    def test_position(self, lines: tuple[AlignedLine, ...]) -> None:
        index = PlayheadIndex(lines)
        assert index.position(2.0) == (0, 2)
        assert index.position(5.9) == (0, 5)
        assert index.position(-1.0) is None

    def test_span_and_len(self, lines: tuple[AlignedLine, ...]) -> None:
        index = PlayheadIndex(lines)
        assert len(index) == 6
        assert index.span == (0.0, 6.0)

    def test_multi_line_positions(self) -> None:
        lines = (
            AlignedLine((AlignedToken("a", "G", 0.0, 1.0),)),
            AlignedLine((AlignedToken("b", None, 1.0, 1.5), AlignedToken("c", "C", 1.5, 3.0))),
        )
        index = PlayheadIndex(lines)
        assert index.position(0.5) == (0, 0)
        assert index.position(1.5) == (1, 1)
        assert index.lookup(3.0) is None

    def test_overlap_agrees(self) -> None:
        events = [chord_event("G", 0.0), chord_event("C", 2.0)]
        lines = align("Hello\n\nworld", events, 4.0)
        index = PlayheadIndex(lines)
        assert index.lookup(3.0) is lines[2].tokens[0]
        assert index.position(3.0) == (2, 0)
        assert index.lookup(3.0) is current_token(lines, 3.0)

    def test_spacer_without_word(self, spacer_lines: tuple[AlignedLine, ...]) -> None:
        index = PlayheadIndex(spacer_lines)
        assert index.position(1.0) == (0, 0)
        assert index.position(3.0) == (1, 0)

    def test_empty(self) -> None:
        index = PlayheadIndex(())
        assert len(index) == 0
        assert index.span is None
        assert index.lookup(0.0) is None
        assert index.position(0.0) is None
