"""Chord timeline library for placing chords above song lyrics.

This library turns lyrics, a list of timed chord changes and a song
duration into rendering-ready lines where each chord sits above the word
it sounds under, and provides the chord vocabulary and transposition
helpers around it.

Examples
--------
>>> from chord_timeline import align, chord_event, current_token

>>> events = [chord_event("G", 0.0), chord_event("C", 2.0), chord_event("D", 4.0)]
>>> lines = align("Amazing grace how sweet the sound", events, 6.0)
>>> [(t.text, t.chord_above) for t in lines[0].tokens][:3]
[('Amazing', 'G'), ('grace', None), ('how', 'C')]

>>> current_token(lines, 4.5).text
'the'

>>> # Transposition and capo helpers
>>> from chord_timeline import Key, capo_for_reference_key, parse_chord, transpose
>>> transpose(parse_chord("Am7"), 3).display
'Cm7'
>>> capo_for_reference_key(Key.A)
2
"""

from chord_timeline.alignment import (
    AlignedLine,
    AlignedToken,
    LyricLine,
    LyricSegment,
    PlainLyrics,
    PlayheadIndex,
    TimedLyrics,
    align,
    current_token,
)
from chord_timeline.config import DEFAULT_SETTINGS, AlignmentSettings
from chord_timeline.converter import chord_event, parse_chord
from chord_timeline.exceptions import ChordParseError, ChordTimelineError, ConfigError
from chord_timeline.models import Chord, ChordEvent, ChordQuality, Key, PitchClass
from chord_timeline.pitch_class import capo_for_reference_key, display, semitone_distance, transpose
from chord_timeline.suggest import suggest_progression

__all__ = [
    "DEFAULT_SETTINGS",
    "AlignedLine",
    "AlignedToken",
    "AlignmentSettings",
    "Chord",
    "ChordEvent",
    "ChordParseError",
    "ChordQuality",
    "ChordTimelineError",
    "ConfigError",
    "Key",
    "LyricLine",
    "LyricSegment",
    "PitchClass",
    "PlainLyrics",
    "PlayheadIndex",
    "TimedLyrics",
    "align",
    "capo_for_reference_key",
    "chord_event",
    "current_token",
    "display",
    "parse_chord",
    "semitone_distance",
    "suggest_progression",
    "transpose",
]
