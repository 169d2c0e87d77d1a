"""Exceptions raised by chord-timeline.

The alignment engine itself is total and raises nothing; these cover the
parsing and configuration helpers around it.
"""


class ChordTimelineError(Exception):
    """Base exception for chord-timeline."""


class ChordParseError(ChordTimelineError, ValueError):
    """A chord symbol or note name could not be parsed."""


class ConfigError(ChordTimelineError):
    """Invalid alignment settings."""
