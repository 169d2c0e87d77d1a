"""Alignment settings for chord-timeline.

Defaults can be overridden through environment variables with
:meth:`AlignmentSettings.from_env`.
"""

from __future__ import annotations

import math
import os
from collections.abc import Mapping
from dataclasses import dataclass

from chord_timeline.exceptions import ConfigError

# Chord-only placeholders per row, bounds rendering width
DEFAULT_ROW_SIZE = 6
DEFAULT_PLACEHOLDER = "•"
# Floor for a chord window with zero or negative raw duration
DEFAULT_WINDOW_EPSILON = 0.05
# Floor for a single token's duration
DEFAULT_TOKEN_EPSILON = 0.01

ENV_PREFIX = "CHORD_TIMELINE_"


@dataclass(frozen=True)
class AlignmentSettings:
    """Tunable constants of the alignment engine.

    Parameters
    ----------
    row_size : int
        Placeholder tokens per row when there are no lyrics.
    placeholder : str
        Text of a chord-only placeholder token.
    window_epsilon : float
        Minimum duration of a chord window, in seconds.
    token_epsilon : float
        Minimum duration of a lyric token, in seconds.
    """

    row_size: int = DEFAULT_ROW_SIZE
    placeholder: str = DEFAULT_PLACEHOLDER
    window_epsilon: float = DEFAULT_WINDOW_EPSILON
    token_epsilon: float = DEFAULT_TOKEN_EPSILON

    def __post_init__(self) -> None:
        self.validate()

    def validate(self) -> None:
        """Raise ConfigError if any value is out of range."""
        if self.row_size < 1:
            msg = f"row_size must be at least 1, got {self.row_size}"
            raise ConfigError(msg)
        for name in ("window_epsilon", "token_epsilon"):
            value = getattr(self, name)
            if not math.isfinite(value) or value <= 0:
                msg = f"{name} must be a positive number, got {value}"
                raise ConfigError(msg)

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> AlignmentSettings:
        """Build settings from ``CHORD_TIMELINE_*`` environment variables."""
        env = os.environ if environ is None else environ
        try:
            return cls(
                row_size=int(env.get(f"{ENV_PREFIX}ROW_SIZE", DEFAULT_ROW_SIZE)),
                placeholder=env.get(f"{ENV_PREFIX}PLACEHOLDER", DEFAULT_PLACEHOLDER),
                window_epsilon=float(env.get(f"{ENV_PREFIX}WINDOW_EPSILON", DEFAULT_WINDOW_EPSILON)),
                token_epsilon=float(env.get(f"{ENV_PREFIX}TOKEN_EPSILON", DEFAULT_TOKEN_EPSILON)),
            )
        except ValueError as exc:
            msg = f"Invalid alignment setting in environment: {exc}"
            raise ConfigError(msg) from exc


DEFAULT_SETTINGS = AlignmentSettings()
