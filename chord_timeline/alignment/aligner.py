"""Lyric/chord time alignment.

This module places chords above lyric words. Three kinds of input are
handled by one entry point, :func:`align`:

- no lyric content: one placeholder token per chord window, in rows;
- timed segments: each segment takes the chord nearest its start time;
- plain text: words are spread over the chord windows of the whole song
  and each window's time is split between its words by character length.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence

from chord_timeline.alignment.models import (
    AlignedLine,
    AlignedToken,
    LyricLine,
    LyricSource,
    PlainLyrics,
    TimedLyrics,
    Window,
)
from chord_timeline.alignment.timeline import (
    build_markers,
    sanitize_seconds,
    sort_events,
    windows_from_markers,
)
from chord_timeline.config import DEFAULT_SETTINGS, AlignmentSettings
from chord_timeline.models import ChordEvent

logger = logging.getLogger(__name__)


def as_lyric_source(lyrics: LyricSource | str | Iterable[LyricLine] | None) -> LyricSource:
    """Coerce the accepted lyric inputs into a lyric source variant.

    A string becomes :class:`PlainLyrics`; any other iterable is read as
    transcript lines and becomes :class:`TimedLyrics`.

    Examples
    --------
    >>> as_lyric_source("Hello world")
    PlainLyrics(text='Hello world')
    """
    if isinstance(lyrics, (PlainLyrics, TimedLyrics)):
        return lyrics
    if lyrics is None:
        return PlainLyrics("")
    if isinstance(lyrics, str):
        return PlainLyrics(lyrics)
    lines = tuple(line if isinstance(line, LyricLine) else LyricLine(tuple(line)) for line in lyrics)
    return TimedLyrics(lines)


def split_lines(text: str) -> list[str]:
    """Split text on line breaks, normalizing ``\\r\\n`` and ``\\r``."""
    text = text.replace("\r\n", "\n").replace("\r", "\n")
    return text.split("\n")


def distribute_words(
    words: Sequence[str],
    start: float,
    end: float,
    label: str | None,
    token_epsilon: float,
) -> list[AlignedToken]:
    """Split ``[start, end)`` between words in proportion to their length.

    Only the first word carries ``label``. The last word absorbs whatever
    is left so the tokens end exactly at ``end``; each token lasts at least
    ``token_epsilon``, which may push the slice past ``end``.

    Parameters
    ----------
    words : Sequence[str]
        The words of the slice, non-empty.
    start : float
        Start of the slice in seconds.
    end : float
        End of the slice in seconds.
    label : str | None
        Chord display string for the first word.
    token_epsilon : float
        Minimum token duration in seconds.

    Returns
    -------
    list[AlignedToken]
        Contiguous tokens, one per word.

    Examples
    --------
    >>> [(t.text, t.start_time, t.end_time) for t in distribute_words(["Hello", "world"], 0.0, 4.0, None, 0.01)]
    [('Hello', 0.0, 2.0), ('world', 2.0, 4.0)]
    """
    span = end - start
    total_chars = max(1, sum(len(word) for word in words))
    last = len(words) - 1

    tokens: list[AlignedToken] = []
    cursor = start
    for idx, word in enumerate(words):
        if idx == last:
            token_end = max(end, cursor + token_epsilon)
        else:
            token_end = cursor + max(token_epsilon, span * len(word) / total_chars)
        tokens.append(
            AlignedToken(
                text=word,
                chord_above=label if idx == 0 else None,
                start_time=cursor,
                end_time=token_end,
            )
        )
        cursor = token_end

    return tokens


def align_chords_only(windows: Sequence[Window], settings: AlignmentSettings) -> tuple[AlignedLine, ...]:
    """One placeholder token per window, grouped into rows of ``settings.row_size``.

    Window times are used as-is, so the last token ends exactly at the
    song duration.
    """
    rows: list[AlignedLine] = []
    row: list[AlignedToken] = []

    for window in windows:
        row.append(
            AlignedToken(
                text=settings.placeholder,
                chord_above=window.label,
                start_time=window.start,
                end_time=window.end,
            )
        )
        if len(row) == settings.row_size:
            rows.append(AlignedLine(tuple(row)))
            row = []

    if row:
        rows.append(AlignedLine(tuple(row)))

    return tuple(rows)


def nearest_event(events: Sequence[ChordEvent], t: float) -> ChordEvent | None:
    """Return the event closest to ``t``, preferring the earlier one on ties.

    ``events`` must be sorted by time.
    """
    best: ChordEvent | None = None
    best_distance = float("inf")
    for event in events:
        distance = abs(event.time - t)
        if distance < best_distance:
            best = event
            best_distance = distance
    return best


def align_timed_segments(
    lyrics: TimedLyrics,
    events: Sequence[ChordEvent],
    duration: float,
    settings: AlignmentSettings,
) -> tuple[AlignedLine, ...]:
    """Label each timed segment with the chord nearest its start.

    A segment lasts until the next segment of the transcript starts, the
    last one until ``duration``. Within a line every token starts where the
    previous one ended.
    """
    starts = [min(sanitize_seconds(seg.start_time), duration) for line in lyrics.lines for seg in line.segments]
    ends = starts[1:] + [duration]

    result: list[AlignedLine] = []
    k = 0
    for line in lyrics.lines:
        tokens: list[AlignedToken] = []
        for seg in line.segments:
            start = starts[k] if not tokens else max(starts[k], tokens[-1].end_time)
            end = max(ends[k], start + settings.token_epsilon)
            nearest = nearest_event(events, starts[k])
            tokens.append(
                AlignedToken(
                    text=seg.text,
                    chord_above=nearest.chord.display if nearest is not None else None,
                    start_time=start,
                    end_time=end,
                )
            )
            k += 1
        result.append(AlignedLine(tuple(tokens)))

    return tuple(result)


def align_plain_text(
    lyrics: PlainLyrics,
    windows: Sequence[Window],
    duration: float,
    settings: AlignmentSettings,
) -> tuple[AlignedLine, ...]:
    """Spread untimed words over the chord windows of the whole song.

    Each window takes ``max(1, remaining_words_in_line // remaining_windows)``
    words of the current line. A single window cursor runs across all
    lines; blank lines do not advance it. Words left once every window is
    used go into one final slice ending at ``duration``.
    """
    result: list[AlignedLine] = []
    cursor = 0

    for raw_line in split_lines(lyrics.text):
        words = raw_line.split()

        if not words:
            window = windows[min(cursor, len(windows) - 1)]
            result.append(
                AlignedLine(
                    (
                        AlignedToken(
                            text="",
                            chord_above=None,
                            start_time=window.start,
                            end_time=max(window.end, window.start + settings.token_epsilon),
                        ),
                    )
                )
            )
            continue

        tokens: list[AlignedToken] = []
        i = 0
        while i < len(words) and cursor < len(windows):
            window = windows[cursor]
            remaining_windows = len(windows) - cursor
            count = max(1, (len(words) - i) // remaining_windows)

            # Floored windows can overlap the next one; keep the line contiguous
            start = window.start if not tokens else max(window.start, tokens[-1].end_time)
            end = max(window.end, start + settings.window_epsilon)

            tokens.extend(distribute_words(words[i : i + count], start, end, window.label, settings.token_epsilon))
            i += count
            cursor += 1

        if i < len(words):
            # The terminal marker at `duration` carries no chord
            start = duration if not tokens else max(duration, tokens[-1].end_time)
            tokens.extend(distribute_words(words[i:], start, duration, None, settings.token_epsilon))

        result.append(AlignedLine(tuple(tokens)))

    return tuple(result)


def align(
    lyrics: LyricSource | str | Iterable[LyricLine] | None,
    chord_events: Iterable[ChordEvent],
    duration: float,
    *,
    settings: AlignmentSettings | None = None,
) -> tuple[AlignedLine, ...]:
    """Align lyrics with a chord timeline.

    This is the main entry point of the alignment engine. It never raises
    for well-typed input: a negative or non-finite duration is treated as
    0, events with non-finite times are dropped, and event times are
    clamped into ``[0, duration]``.

    Parameters
    ----------
    lyrics : PlainLyrics | TimedLyrics | str | Iterable[LyricLine] | None
        The lyric source. Strings are plain text; other iterables are read
        as timed transcript lines.
    chord_events : Iterable[ChordEvent]
        Chord changes in any order.
    duration : float
        Song duration in seconds.
    settings : AlignmentSettings | None
        Engine constants. Defaults to ``DEFAULT_SETTINGS``.

    Returns
    -------
    tuple[AlignedLine, ...]
        Rendering-ready lines in reading order.

    Examples
    --------
    >>> from chord_timeline.converter import chord_event
    >>> lines = align("Hello world", [chord_event("G", 0.0), chord_event("C", 2.0)], 4.0)
    >>> [(t.text, t.chord_above) for t in lines[0].tokens]
    [('Hello', 'G'), ('world', 'C')]
    """
    settings = settings or DEFAULT_SETTINGS
    source = as_lyric_source(lyrics)
    duration = sanitize_seconds(duration)
    events = sort_events(chord_events, duration)
    windows = windows_from_markers(build_markers(events, duration))

    if not source.has_content():
        logger.debug("Aligning %d chord windows without lyrics", len(windows))
        return align_chords_only(windows, settings)

    if isinstance(source, TimedLyrics):
        logger.debug("Aligning %d timed lines to %d chord events", len(source.lines), len(events))
        return align_timed_segments(source, events, duration, settings)

    logger.debug("Spreading plain lyrics over %d chord windows", len(windows))
    return align_plain_text(source, windows, duration, settings)
