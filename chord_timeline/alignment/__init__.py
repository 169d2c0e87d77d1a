"""Lyric/chord time alignment.

This package places chord symbols above lyric words using a chord
timeline, and answers which token is current at a playback time.
"""

from chord_timeline.alignment.aligner import align, as_lyric_source, distribute_words, nearest_event
from chord_timeline.alignment.models import (
    AlignedLine,
    AlignedToken,
    LyricLine,
    LyricSegment,
    LyricSource,
    Marker,
    PlainLyrics,
    TimedLyrics,
    Window,
)
from chord_timeline.alignment.playhead import PlayheadIndex, current_token
from chord_timeline.alignment.timeline import build_markers, build_windows, sanitize_seconds, sort_events

__all__ = [
    "AlignedLine",
    "AlignedToken",
    "LyricLine",
    "LyricSegment",
    "LyricSource",
    "Marker",
    "PlainLyrics",
    "PlayheadIndex",
    "TimedLyrics",
    "Window",
    "align",
    "as_lyric_source",
    "build_markers",
    "build_windows",
    "current_token",
    "distribute_words",
    "nearest_event",
    "sanitize_seconds",
    "sort_events",
]
