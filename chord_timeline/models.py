"""Chord vocabulary data models for chord-timeline.

Pitch classes carry their dense integer code (semitones above C) so all
arithmetic happens on integers and names only appear at the display
boundary.
"""

from __future__ import annotations

import uuid
from dataclasses import dataclass, field
from enum import Enum


class PitchClass(Enum):
    """One of the 12 pitch classes, valued by semitones above C."""

    C = 0
    C_SHARP = 1
    D = 2
    D_SHARP = 3
    E = 4
    F = 5
    F_SHARP = 6
    G = 7
    G_SHARP = 8
    A = 9
    A_SHARP = 10
    B = 11

    @property
    def index(self) -> int:
        """Semitone position from C (0-11)."""
        return self.value

    @property
    def symbol(self) -> str:
        """Display name, spelled with sharps (e.g. "F#")."""
        return self.name.replace("_SHARP", "#")

    def __lt__(self, other: PitchClass) -> bool:
        if not isinstance(other, PitchClass):
            return NotImplemented
        return self.value < other.value

    def __le__(self, other: PitchClass) -> bool:
        if not isinstance(other, PitchClass):
            return NotImplemented
        return self.value <= other.value

    def __gt__(self, other: PitchClass) -> bool:
        if not isinstance(other, PitchClass):
            return NotImplemented
        return self.value > other.value

    def __ge__(self, other: PitchClass) -> bool:
        if not isinstance(other, PitchClass):
            return NotImplemented
        return self.value >= other.value


class ChordQuality(Enum):
    """Chord quality with its fixed display suffix."""

    MAJOR = "major"
    MINOR = "minor"
    DIM = "dim"
    AUG = "aug"
    SUS = "sus"

    @property
    def symbol(self) -> str:
        return _QUALITY_SYMBOLS[self]


_QUALITY_SYMBOLS: dict[ChordQuality, str] = {
    ChordQuality.MAJOR: "",
    ChordQuality.MINOR: "m",
    ChordQuality.DIM: "dim",
    ChordQuality.AUG: "+",
    ChordQuality.SUS: "sus",
}


class Key(Enum):
    """Song keys offered to the performer, spelled as musicians write them."""

    C = "C"
    G = "G"
    D = "D"
    A = "A"
    E = "E"
    B = "B"
    F_SHARP = "F#"
    C_SHARP = "C#"
    F = "F"
    B_FLAT = "Bb"
    E_FLAT = "Eb"
    A_FLAT = "Ab"

    @property
    def pitch_class(self) -> PitchClass:
        """The pitch class of the key's tonic."""
        return _KEY_TO_PITCH_CLASS[self]


_KEY_TO_PITCH_CLASS: dict[Key, PitchClass] = {
    Key.C: PitchClass.C,
    Key.G: PitchClass.G,
    Key.D: PitchClass.D,
    Key.A: PitchClass.A,
    Key.E: PitchClass.E,
    Key.B: PitchClass.B,
    Key.F_SHARP: PitchClass.F_SHARP,
    Key.C_SHARP: PitchClass.C_SHARP,
    Key.F: PitchClass.F,
    Key.B_FLAT: PitchClass.A_SHARP,
    Key.E_FLAT: PitchClass.D_SHARP,
    Key.A_FLAT: PitchClass.G_SHARP,
}


@dataclass(frozen=True)
class Chord:
    """A chord as it is displayed above a lyric.

    Parameters
    ----------
    root : PitchClass
        The root of the chord.
    quality : ChordQuality
        The chord quality. Defaults to major.
    extension : str | None
        Free-text suffix such as "7", "4" or "add9".

    Examples
    --------
    >>> Chord(PitchClass.A, ChordQuality.MINOR, "7").display
    'Am7'
    >>> Chord(PitchClass.F_SHARP).display
    'F#'
    """

    root: PitchClass
    quality: ChordQuality = ChordQuality.MAJOR
    extension: str | None = None

    @property
    def display(self) -> str:
        """Root symbol, then quality symbol, then extension."""
        return f"{self.root.symbol}{self.quality.symbol}{self.extension or ''}"

    def __str__(self) -> str:
        return self.display


@dataclass(frozen=True)
class ChordEvent:
    """A chord that starts sounding at ``time`` seconds into the song.

    Parameters
    ----------
    chord : Chord
        The chord that begins.
    time : float
        Start time in seconds from the beginning of the song.
    id : str
        Unique identifier; a fresh UUID4 string unless given.
    """

    chord: Chord
    time: float
    id: str = field(default_factory=lambda: str(uuid.uuid4()))
