# src/ignorekit/core/section.py
import logging
import os
from typing import TYPE_CHECKING, Callable, Dict, Iterator, Optional, Set

from ignorekit.core.codec import format_line, split_pattern
from ignorekit.core.entry import Entry

if TYPE_CHECKING:
    from ignorekit.core.file import IgnoreFile

logger = logging.getLogger(__name__)


class Section:
    """
    A section of an ignore file.

    Each section starts with a title comment, except possibly for the very
    first one, which title is an empty string. The section consists of the
    patterns following its title.

    Sections are created by `IgnoreFile.section()` and never directly.
    """

    def __init__(self, file: "IgnoreFile", title: str):
        self._file = file
        self._title = title
        # Attached entries in attachment order. May contain patterns moved
        # to other sections; those are pruned by `entries()`.
        self._entries: Dict[str, Entry] = {}
        # Patterns to remove when the running `replace()` completes
        self._pending: Optional[Set[str]] = None

    @property
    def file(self) -> "IgnoreFile":
        return self._file

    @property
    def title(self) -> str:
        return self._title

    def entries(self) -> Iterator[Entry]:
        """Iterates over entries attached to this section."""
        for pattern, entry in list(self._entries.items()):
            attachment = self._file._registry.get(pattern)
            if attachment is None or attachment.section is not self:
                del self._entries[pattern]
            else:
                yield entry

    def patterns(self) -> Iterator[str]:
        for entry in self.entries():
            yield entry.pattern

    def entry(self, raw_pattern: str) -> Entry:
        """
        Finds an entry attached to this section, or creates a new handle.

        `raw_pattern` may carry a leading `!` and a trailing `/`. These are
        applied to a new handle, but not to the file until it is attached.
        The returned entry belongs to this section, even though the pattern
        may currently be attached to another one.
        """
        pattern, effect, match = split_pattern(raw_pattern)

        if effect is None and match is None:
            entry = self._entries.get(pattern)
            if entry is not None and entry.is_attached:
                return entry

        return Entry(self, pattern, effect, match)

    def replace(self, build: Callable[["Section"], None]) -> "Section":
        """
        Replaces the entries of this section with the ones declared by `build`.

        Every entry of this section attached, ignored, or updated by `build`
        is retained, and the rest of them removed afterwards. Removal happens
        even when `build` fails. Nested calls join the outermost one.

        Retained entries keep their positions, whatever order `build`
        declares them in. New entries are appended.
        """
        if self._pending is not None:
            build(self)
            return self

        self._pending = set(self.patterns())
        try:
            build(self)
        finally:
            pending, self._pending = self._pending, None
            if pending:
                logger.debug("Removing %d undeclared pattern(s) from section %r", len(pending), self._title)
            for pattern, entry in list(self._entries.items()):
                if pattern in pending:
                    entry.remove()

        return self

    def _declare(self, pattern: str) -> None:
        if self._pending is not None:
            self._pending.discard(pattern)

    def to_string(self, eol: str = os.linesep) -> str:
        """Builds the title comment and pattern lines of this section."""
        out = ""

        if self._title:
            out += "# " + self._title.replace("\n", eol + "# ") + eol
        for entry in self.entries():
            attachment = self._file._registry[entry.pattern]
            out += format_line(entry.pattern, attachment.effect, attachment.match) + eol

        return out

    def __str__(self) -> str:
        return self.to_string()

    def __repr__(self) -> str:
        return f"Section({self._title!r})"
