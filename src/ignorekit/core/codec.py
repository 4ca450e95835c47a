# src/ignorekit/core/codec.py
from typing import Optional, Tuple

from ignorekit.models import Effect, Match, PatternLine


def parse_line(line: str) -> Optional[PatternLine]:
    """
    Decodes a single non-comment line of an ignore file.

    Trailing whitespace is dropped, unless it is followed by a `\\`.
    Returns None for lines carrying no pattern.
    """
    line = line.rstrip()

    if line.endswith("\\"):
        # `pattern   \` keeps the spaces before the escape
        line = line[:-1]
    if line.startswith("\\#"):
        line = line[1:]
    if not line:
        return None

    effect = Effect.IGNORE
    match = Match.ALL

    if line.startswith("!"):
        line = line[1:]
        effect = Effect.INCLUDE
    if line.endswith("/"):
        line = line[:-1]
        match = Match.DIRS
    if not line:
        return None

    return PatternLine(line, effect, match)


def format_line(pattern: str, effect: Effect = Effect.IGNORE, match: Match = Match.ALL) -> str:
    """Encodes a pattern back to the line that `parse_line` decodes it from."""
    if effect is Effect.INCLUDE:
        line = "!" + pattern
    elif pattern.startswith("#"):
        line = "\\" + pattern
    else:
        line = pattern

    if match is Match.DIRS:
        line += "/"
    if pattern != pattern.rstrip() or line.endswith("\\"):
        line += "\\"

    return line


def split_pattern(raw_pattern: str) -> Tuple[str, Optional[Effect], Optional[Match]]:
    """
    Splits a pattern given by caller, like `dist/` or `!keep.txt`.

    Unlike `parse_line`, whitespace and escapes are taken literally.
    Markers absent from the pattern are reported as None.
    """
    if "\n" in raw_pattern or "\r" in raw_pattern:
        raise ValueError(f"Pattern can not span multiple lines: {raw_pattern!r}")

    pattern = raw_pattern
    effect = None
    match = None

    if pattern.startswith("!"):
        pattern = pattern[1:]
        effect = Effect.INCLUDE
    if pattern.endswith("/"):
        pattern = pattern[:-1]
        match = Match.DIRS
    if not pattern:
        raise ValueError(f"Empty pattern: {raw_pattern!r}")

    return pattern, effect, match
