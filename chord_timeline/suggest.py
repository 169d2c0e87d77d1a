"""Chord progression scaffolding.

Seeds a song with a repeating I-V-vi-IV progression at a fixed spacing so
the performer has chord events to correct instead of tapping every change
from scratch.
"""

from __future__ import annotations

import logging

from chord_timeline.models import Chord, ChordEvent, ChordQuality
from chord_timeline.pitch_class import KeyLike, key_index, pc_to_pitch_class

logger = logging.getLogger(__name__)

# Semitone offsets of the major scale degrees 1-7
MAJOR_SCALE_OFFSETS: tuple[int, ...] = (0, 2, 4, 5, 7, 9, 11)

# (scale degree, is minor) for I-V-vi-IV
DEFAULT_PROGRESSION: tuple[tuple[int, bool], ...] = ((1, False), (5, False), (6, True), (4, False))


def degree_chord(song_key: KeyLike, degree: int, *, minor: bool = False) -> Chord:
    """Return the triad on a scale degree of a major key.

    Degrees outside 1-7 are clamped into that range.

    Examples
    --------
    >>> from chord_timeline.models import Key
    >>> degree_chord(Key.G, 6, minor=True).display
    'Em'
    """
    offset = MAJOR_SCALE_OFFSETS[max(1, min(7, degree)) - 1]
    root = pc_to_pitch_class(key_index(song_key) + offset)
    quality = ChordQuality.MINOR if minor else ChordQuality.MAJOR
    return Chord(root=root, quality=quality)


def suggest_progression(
    song_key: KeyLike,
    duration: float,
    spacing: float = 2.0,
    progression: tuple[tuple[int, bool], ...] = DEFAULT_PROGRESSION,
) -> tuple[ChordEvent, ...]:
    """Lay a repeating progression over a song.

    Parameters
    ----------
    song_key : Key | PitchClass
        Key of the song.
    duration : float
        Song length in seconds. Nothing is emitted for a non-positive duration.
    spacing : float
        Seconds between chord changes.
    progression : tuple[tuple[int, bool], ...]
        Scale degrees and minor flags to cycle through.

    Returns
    -------
    tuple[ChordEvent, ...]
        Events at 0, spacing, 2*spacing, ... strictly before ``duration``.

    Raises
    ------
    ValueError
        If ``spacing`` is not positive or ``progression`` is empty.

    Examples
    --------
    >>> from chord_timeline.models import Key
    >>> [e.chord.display for e in suggest_progression(Key.C, 8.0)]
    ['C', 'G', 'Am', 'F']
    """
    if spacing <= 0:
        msg = f"spacing must be positive, got {spacing}"
        raise ValueError(msg)
    if not progression:
        msg = "progression must not be empty"
        raise ValueError(msg)
    if not duration > 0:
        return ()

    events: list[ChordEvent] = []
    i = 0
    t = 0.0
    while t < duration:
        degree, minor = progression[i % len(progression)]
        events.append(ChordEvent(chord=degree_chord(song_key, degree, minor=minor), time=t))
        i += 1
        t = i * spacing

    logger.debug("Suggested %d chord events over %.2fs", len(events), duration)
    return tuple(events)
