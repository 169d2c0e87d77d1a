"""Pitch class operations for transposition and capo placement.

All arithmetic is done on the dense integer code of a pitch class (0-11,
where C=0); enumerants and note names are only converted at the edges.
"""

from __future__ import annotations

from chord_timeline.exceptions import ChordParseError
from chord_timeline.models import Chord, Key, PitchClass

# Note name to pitch class (0-11, where C=0)
NOTE_TO_PC: dict[str, int] = {
    "C": 0,
    "C#": 1,
    "Db": 1,
    "D": 2,
    "D#": 3,
    "Eb": 3,
    "E": 4,
    "Fb": 4,
    "E#": 5,
    "F": 5,
    "F#": 6,
    "Gb": 6,
    "G": 7,
    "G#": 8,
    "Ab": 8,
    "A": 9,
    "A#": 10,
    "Bb": 10,
    "B": 11,
    "Cb": 11,
    "B#": 0,
}

# Canonical enumerant for each code, so sharps win over flats
PC_TO_PITCH_CLASS: tuple[PitchClass, ...] = tuple(sorted(PitchClass, key=lambda p: p.value))

PITCH_CLASS_COUNT = 12

KeyLike = Key | PitchClass


def note_to_pc(note: str) -> int:
    """Convert a note name to pitch class (0-11).

    Parameters
    ----------
    note : str
        Note name (e.g., "C", "F#", "Bb").

    Returns
    -------
    int
        Pitch class (0-11, where C=0).

    Raises
    ------
    ChordParseError
        If the note name is not recognized.

    Examples
    --------
    >>> note_to_pc("F#")
    6
    >>> note_to_pc("Bb")
    10
    """
    if note in NOTE_TO_PC:
        return NOTE_TO_PC[note]
    msg = f"Unknown note: {note}"
    raise ChordParseError(msg)


def pc_to_pitch_class(pc: int) -> PitchClass:
    """Return the canonical (sharp-spelled) pitch class for any integer code."""
    return PC_TO_PITCH_CLASS[pc % PITCH_CLASS_COUNT]


def key_index(key: KeyLike) -> int:
    """Integer code of a key's tonic, accepting a Key or a PitchClass."""
    if isinstance(key, Key):
        return key.pitch_class.index
    return key.index


def display(chord: Chord) -> str:
    """Display string of a chord: root, quality symbol, then extension."""
    return chord.display


def transpose(chord: Chord, semitones: int) -> Chord:
    """Transpose a chord by a number of semitones.

    Parameters
    ----------
    chord : Chord
        The chord to transpose.
    semitones : int
        Number of semitones to transpose (positive = up).

    Returns
    -------
    Chord
        Transposed chord with the same quality and extension.

    Examples
    --------
    >>> from chord_timeline.models import PitchClass
    >>> transpose(Chord(PitchClass.C), 2).display
    'D'
    >>> transpose(Chord(PitchClass.C), -1).display
    'B'
    """
    new_root = pc_to_pitch_class(chord.root.index + semitones)
    return Chord(root=new_root, quality=chord.quality, extension=chord.extension)


def semitone_distance(from_key: KeyLike, to_key: KeyLike) -> int:
    """Signed semitone difference between two keys, not normalized.

    Examples
    --------
    >>> from chord_timeline.models import Key
    >>> semitone_distance(Key.G, Key.C)
    -7
    >>> semitone_distance(Key.C, Key.G)
    7
    """
    return key_index(to_key) - key_index(from_key)


def capo_for_reference_key(song_key: KeyLike, reference_key: KeyLike = Key.G) -> int:
    """Capo fret that lets a song in ``song_key`` be played with ``reference_key`` shapes.

    Parameters
    ----------
    song_key : Key | PitchClass
        The key the song sounds in.
    reference_key : Key | PitchClass
        The key whose open-chord fingerings the performer uses. Defaults to G.

    Returns
    -------
    int
        Fret number in [0, 11].

    Examples
    --------
    >>> from chord_timeline.models import Key
    >>> capo_for_reference_key(Key.A)
    2
    >>> capo_for_reference_key(Key.F)
    10
    """
    capo = key_index(song_key) - key_index(reference_key)
    if capo < 0:
        capo += PITCH_CLASS_COUNT
    return capo % PITCH_CLASS_COUNT
