# src/ignorekit/models.py
from dataclasses import dataclass
from enum import Enum


class Effect(str, Enum):
    """What a pattern does to the paths it matches."""
    IGNORE = "ignore"
    INCLUDE = "include"


class Match(str, Enum):
    """Which paths a pattern applies to."""
    ALL = "all"
    DIRS = "dirs"


@dataclass(frozen=True)
class PatternLine:
    """Immutable data class holding one decoded pattern line."""
    pattern: str
    effect: Effect = Effect.IGNORE
    match: Match = Match.ALL
