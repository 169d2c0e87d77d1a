"""Playhead lookup for live highlighting.

Given aligned lines and a playback time, find the token to highlight: the
first lyric token in reading order whose half-open window ``[start, end)``
contains the time. Blank-line spacers share their window with the next
line's first slice, so they are only returned when no word matches.
"""

from __future__ import annotations

from collections.abc import Sequence

import numpy as np

from chord_timeline.alignment.models import AlignedLine, AlignedToken


def current_token(
    lines: Sequence[AlignedLine],
    t: float,
    *,
    duration: float | None = None,
) -> AlignedToken | None:
    """Return the token being played at time ``t``, if any.

    Parameters
    ----------
    lines : Sequence[AlignedLine]
        Output of :func:`~chord_timeline.alignment.aligner.align`.
    t : float
        Playhead position in seconds.
    duration : float | None
        Song duration. Pass it to guarantee that nothing is current at or
        after the end of the song; without it, tokens floored past the end
        (zero-length songs, words spilled after the last chord) can still
        match.

    Returns
    -------
    AlignedToken | None
        The first token with ``start_time <= t < end_time``, or None. An
        empty spacer token left by a blank line only wins when no lyric
        token covers ``t``.

    Examples
    --------
    >>> from chord_timeline.alignment.models import AlignedLine, AlignedToken
    >>> lines = [AlignedLine((AlignedToken("a", "G", 0.0, 1.0), AlignedToken("b", None, 1.0, 2.0)))]
    >>> current_token(lines, 1.0).text
    'b'
    >>> current_token(lines, 2.0) is None
    True
    """
    if t < 0 or (duration is not None and t >= duration):
        return None
    spacer: AlignedToken | None = None
    for line in lines:
        for token in line.tokens:
            if not token.contains(t):
                continue
            if token.text:
                return token
            if spacer is None:
                spacer = token
    return spacer


class PlayheadIndex:
    """Precomputed token windows for repeated playhead queries.

    Gives the same answers as :func:`current_token`, with the token
    windows held in numpy arrays so each tick is one vectorized pass.

    Parameters
    ----------
    lines : Sequence[AlignedLine]
        Output of :func:`~chord_timeline.alignment.aligner.align`.
    duration : float | None
        Song duration. When given, nothing is current at or after it;
        without it, floored tokens past the end can still match.
    """

    def __init__(self, lines: Sequence[AlignedLine], duration: float | None = None) -> None:
        self.duration = duration
        self._positions: list[tuple[int, int]] = []
        self._tokens: list[AlignedToken] = []
        for line_index, line in enumerate(lines):
            for token_index, token in enumerate(line.tokens):
                self._positions.append((line_index, token_index))
                self._tokens.append(token)

        self._starts = np.array([tok.start_time for tok in self._tokens], dtype=np.float64)
        self._ends = np.array([tok.end_time for tok in self._tokens], dtype=np.float64)
        self._spacers = np.array([not tok.text for tok in self._tokens], dtype=bool)

    def __len__(self) -> int:
        return len(self._tokens)

    @property
    def span(self) -> tuple[float, float] | None:
        """(earliest start, latest end) over all tokens, or None if empty."""
        if not self._tokens:
            return None
        return float(self._starts.min()), float(self._ends.max())

    def _find(self, t: float) -> int | None:
        if not self._tokens or t < 0 or (self.duration is not None and t >= self.duration):
            return None
        hits = np.flatnonzero((self._starts <= t) & (t < self._ends))
        if hits.size == 0:
            return None
        words = hits[~self._spacers[hits]]
        return int(words[0]) if words.size else int(hits[0])

    def lookup(self, t: float) -> AlignedToken | None:
        """Return the token current at ``t``, or None."""
        found = self._find(t)
        return None if found is None else self._tokens[found]

    def position(self, t: float) -> tuple[int, int] | None:
        """Return ``(line_index, token_index)`` of the current token, or None."""
        found = self._find(t)
        return None if found is None else self._positions[found]
