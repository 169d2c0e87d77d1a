"""Chord symbol parsing.

This module turns chord symbols as a performer types them ("Am7", "Bb",
"Dsus4", "C/E") into :class:`~chord_timeline.models.Chord` values, using
pychord to validate and split the symbol.
"""

from __future__ import annotations

from chord_timeline.exceptions import ChordParseError
from chord_timeline.models import Chord, ChordEvent, ChordQuality
from chord_timeline.pitch_class import note_to_pc, pc_to_pitch_class

# Mapping from pychord quality names to a display quality plus extension
PYCHORD_QUALITY_TO_DISPLAY: dict[str, tuple[ChordQuality, str | None]] = {
    "": (ChordQuality.MAJOR, None),
    "m": (ChordQuality.MINOR, None),
    "m7": (ChordQuality.MINOR, "7"),
    "7": (ChordQuality.MAJOR, "7"),
    "maj7": (ChordQuality.MAJOR, "maj7"),
    "M7": (ChordQuality.MAJOR, "maj7"),
    "dim": (ChordQuality.DIM, None),
    "dim7": (ChordQuality.DIM, "7"),
    "dim6": (ChordQuality.DIM, "6"),
    "aug": (ChordQuality.AUG, None),
    "+": (ChordQuality.AUG, None),
    "aug7": (ChordQuality.AUG, "7"),
    "m7-5": (ChordQuality.MINOR, "7b5"),
    "m7b5": (ChordQuality.MINOR, "7b5"),
    "sus": (ChordQuality.SUS, None),
    "sus4": (ChordQuality.SUS, "4"),
    "sus2": (ChordQuality.SUS, "2"),
    "7sus4": (ChordQuality.MAJOR, "7sus4"),
    "7sus2": (ChordQuality.MAJOR, "7sus2"),
    "sus47": (ChordQuality.MAJOR, "7sus4"),
    "sus27": (ChordQuality.MAJOR, "7sus2"),
    "add9": (ChordQuality.MAJOR, "add9"),
    "madd9": (ChordQuality.MINOR, "add9"),
    "9": (ChordQuality.MAJOR, "9"),
    "m9": (ChordQuality.MINOR, "9"),
    "maj9": (ChordQuality.MAJOR, "maj9"),
    "11": (ChordQuality.MAJOR, "11"),
    "m11": (ChordQuality.MINOR, "11"),
    "maj11": (ChordQuality.MAJOR, "maj11"),
    "13": (ChordQuality.MAJOR, "13"),
    "m13": (ChordQuality.MINOR, "13"),
    "maj13": (ChordQuality.MAJOR, "maj13"),
    "6": (ChordQuality.MAJOR, "6"),
    "m6": (ChordQuality.MINOR, "6"),
    "mmaj7": (ChordQuality.MINOR, "maj7"),
    "mM7": (ChordQuality.MINOR, "maj7"),
    "5": (ChordQuality.MAJOR, "5"),
}


def pychord_quality_to_display(pychord_quality: str) -> tuple[ChordQuality, str | None]:
    """Convert a pychord quality string to a display quality and extension.

    Parameters
    ----------
    pychord_quality : str
        The pychord quality (e.g., "m7", "maj7", "sus4").

    Returns
    -------
    tuple[ChordQuality, str | None]
        The quality and the free-text extension that follows it.

    Raises
    ------
    ChordParseError
        If the quality is not recognized.

    Examples
    --------
    >>> pychord_quality_to_display("m7")
    (<ChordQuality.MINOR: 'minor'>, '7')
    """
    if pychord_quality in PYCHORD_QUALITY_TO_DISPLAY:
        return PYCHORD_QUALITY_TO_DISPLAY[pychord_quality]
    msg = f"Unknown pychord quality: {pychord_quality}"
    raise ChordParseError(msg)


def parse_chord(symbol: str) -> Chord:
    """Parse a chord symbol into a Chord.

    Roots spelled with flats are normalized to the sharp pitch class. A
    slash bass is kept verbatim at the end of the extension.

    Parameters
    ----------
    symbol : str
        Chord symbol (e.g., "Gm7", "Bb", "F#dim7/A").

    Returns
    -------
    Chord
        The parsed chord.

    Raises
    ------
    ChordParseError
        If pychord rejects the symbol or its quality has no display mapping.

    Examples
    --------
    >>> parse_chord("Bbm7").display
    'A#m7'
    >>> parse_chord("C/E").display
    'C/E'
    """
    from pychord import Chord as PyChord

    text = symbol.strip()
    if not text:
        msg = "Empty chord symbol"
        raise ChordParseError(msg)

    try:
        pc = PyChord(text)
    except ValueError as exc:
        msg = f"Unknown chord: {symbol}"
        raise ChordParseError(msg) from exc

    quality, extension = pychord_quality_to_display(str(pc.quality))
    root = pc_to_pitch_class(note_to_pc(pc.root))

    if pc.on:
        extension = f"{extension or ''}/{pc.on}"

    return Chord(root=root, quality=quality, extension=extension)


def chord_event(symbol: str, time: float) -> ChordEvent:
    """Build a ChordEvent from a chord symbol and a start time in seconds.

    Examples
    --------
    >>> chord_event("G", 0.0).chord.display
    'G'
    """
    return ChordEvent(chord=parse_chord(symbol), time=time)
