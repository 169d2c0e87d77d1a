"""Marker timeline construction.

The marker timeline is the sorted sequence of chord-change times bounded by
a synthetic start marker at 0 and a terminal marker at the song duration.
Consecutive markers delimit the windows that lyric words are spread over.
"""

from __future__ import annotations

import logging
import math
from collections.abc import Iterable

from chord_timeline.alignment.models import Marker, Window
from chord_timeline.models import ChordEvent

logger = logging.getLogger(__name__)


def sanitize_seconds(value: float) -> float:
    """Clamp a time or duration into ``[0, inf)``; NaN and infinities become 0.

    Examples
    --------
    >>> sanitize_seconds(-3.0)
    0.0
    >>> sanitize_seconds(float("nan"))
    0.0
    """
    try:
        value = float(value)
    except (TypeError, ValueError):
        return 0.0
    if not math.isfinite(value) or value < 0:
        return 0.0
    return value


def sort_events(chord_events: Iterable[ChordEvent], duration: float) -> list[ChordEvent]:
    """Sort chord events by time, dropping unusable ones.

    Events with a non-finite time are dropped. The remaining times are
    clamped into ``[0, duration]``. The sort is stable, so events sharing a
    time keep their input order.

    Parameters
    ----------
    chord_events : Iterable[ChordEvent]
        Events in any order.
    duration : float
        Sanitized song duration in seconds.

    Returns
    -------
    list[ChordEvent]
        Events sorted by (clamped) time.
    """
    kept: list[ChordEvent] = []
    for event in chord_events:
        if not math.isfinite(event.time):
            logger.warning("Dropping chord event %s with non-finite time %r", event.id, event.time)
            continue
        clamped = min(max(event.time, 0.0), duration)
        if clamped != event.time:
            event = ChordEvent(chord=event.chord, time=clamped, id=event.id)
        kept.append(event)
    return sorted(kept, key=lambda e: e.time)


def build_markers(chord_events: Iterable[ChordEvent], duration: float) -> list[Marker]:
    """Build the marker timeline for a song.

    The synthetic start marker is left out when the first chord event
    already begins at 0, so the first window carries that chord.

    Parameters
    ----------
    chord_events : Iterable[ChordEvent]
        Events in any order.
    duration : float
        Song duration in seconds.

    Returns
    -------
    list[Marker]
        At least two markers; the last one sits at ``duration``.

    Examples
    --------
    >>> from chord_timeline.converter import chord_event
    >>> [(m.time, m.label) for m in build_markers([chord_event("G", 2.0)], 4.0)]
    [(0.0, None), (2.0, 'G'), (4.0, None)]
    """
    duration = sanitize_seconds(duration)
    events = sort_events(chord_events, duration)

    markers: list[Marker] = []
    if not events or events[0].time > 0:
        markers.append(Marker(time=0.0))
    markers.extend(Marker(time=e.time, label=e.chord.display) for e in events)
    markers.append(Marker(time=duration))
    return markers


def windows_from_markers(markers: list[Marker]) -> list[Window]:
    """Pair consecutive markers into windows labelled by the earlier marker."""
    return [
        Window(start=current.time, end=following.time, label=current.label)
        for current, following in zip(markers, markers[1:])
    ]


def build_windows(chord_events: Iterable[ChordEvent], duration: float) -> list[Window]:
    """Build the chord windows of a song; there is always at least one."""
    return windows_from_markers(build_markers(chord_events, duration))
