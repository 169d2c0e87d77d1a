"""Data models for lyric/chord alignment.

This module defines the lyric sources the engine accepts and the
rendering-ready lines it produces.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class LyricSegment:
    """A transcribed word or phrase with its start time.

    Parameters
    ----------
    text : str
        The segment text.
    start_time : float
        Start time in seconds.
    """

    text: str
    start_time: float


@dataclass(frozen=True)
class LyricLine:
    """One transcript line made of timed segments."""

    segments: tuple[LyricSegment, ...] = ()


@dataclass(frozen=True)
class PlainLyrics:
    """Free lyric text with line breaks and no timing.

    Parameters
    ----------
    text : str
        The lyrics, one line per line break.
    """

    text: str

    def has_content(self) -> bool:
        """True if any line holds non-whitespace text."""
        return any(line.strip() for line in self.text.splitlines())


@dataclass(frozen=True)
class TimedLyrics:
    """Transcript lines with per-segment timestamps.

    Parameters
    ----------
    lines : tuple[LyricLine, ...]
        The transcript, in reading order.
    """

    lines: tuple[LyricLine, ...]

    def has_content(self) -> bool:
        """True if any segment holds non-whitespace text."""
        return any(seg.text.strip() for line in self.lines for seg in line.segments)


LyricSource = PlainLyrics | TimedLyrics


@dataclass(frozen=True)
class Marker:
    """A point on the chord timeline.

    Parameters
    ----------
    time : float
        Time in seconds.
    label : str | None
        Display string of the chord starting here, or None for the
        synthetic start and end markers.
    """

    time: float
    label: str | None = None


@dataclass(frozen=True)
class Window:
    """Half-open interval between two consecutive markers.

    Parameters
    ----------
    start : float
        Inclusive start time in seconds.
    end : float
        Exclusive end time in seconds (may equal ``start``).
    label : str | None
        Chord display string active during the window.
    """

    start: float
    end: float
    label: str | None = None

    @property
    def duration(self) -> float:
        """Raw duration; zero or negative for coincident markers."""
        return self.end - self.start


@dataclass(frozen=True)
class AlignedToken:
    """A renderable piece of text with an optional chord above it.

    Parameters
    ----------
    text : str
        Displayed text (a word, a placeholder glyph, or empty).
    chord_above : str | None
        Chord display string printed above the start of ``text``.
    start_time : float
        Inclusive start of the highlight window in seconds.
    end_time : float
        Exclusive end of the highlight window in seconds.
    """

    text: str
    chord_above: str | None
    start_time: float
    end_time: float

    def contains(self, t: float) -> bool:
        """True if ``t`` falls in ``[start_time, end_time)``."""
        return self.start_time <= t < self.end_time


@dataclass(frozen=True)
class AlignedLine:
    """Tokens of one rendered line, left to right."""

    tokens: tuple[AlignedToken, ...] = ()

    @property
    def text(self) -> str:
        """Lyric text of the line, words joined by single spaces."""
        return " ".join(token.text for token in self.tokens)

    @property
    def chords(self) -> tuple[str, ...]:
        """Chord labels on the line, in reading order."""
        return tuple(token.chord_above for token in self.tokens if token.chord_above)
