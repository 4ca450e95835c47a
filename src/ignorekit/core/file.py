# src/ignorekit/core/file.py
import logging
import os
import re
from pathlib import Path
from typing import Dict, FrozenSet, Iterator, List, Optional, Tuple, Union

from ignorekit.core.codec import format_line, parse_line, split_pattern
from ignorekit.core.entry import Attachment, Entry
from ignorekit.core.section import Section
from ignorekit.models import Effect, Match

logger = logging.getLogger(__name__)

_LINE_BREAK = re.compile(r"\r?\n")


class IgnoreFile:
    """
    In-memory representation of a file in `.gitignore` format.

    The file consists of sections separated by comments. Each pattern may
    appear in the file only once, so it is attached to at most one section.

    The file tracks whether its patterns changed since it was parsed or
    saved, so that unchanged content is never written back.
    """

    def __init__(self):
        self._sections: Dict[str, Section] = {}
        self._registry: Dict[str, Attachment] = {}
        self._baseline = self._snapshot()

    @property
    def is_modified(self) -> bool:
        return self._snapshot() != self._baseline

    def reset_modified(self) -> "IgnoreFile":
        """Treats the current content as the saved one."""
        self._baseline = self._snapshot()
        return self

    def section(self, title: str = "") -> Section:
        """Returns the section with the given title, creating it when missing."""
        section = self._sections.get(title)
        if section is None:
            section = Section(self, title)
            self._sections[title] = section
        return section

    def sections(self) -> Iterator[Section]:
        yield from self._sections.values()

    def entries(self) -> Iterator[Entry]:
        for section in self.sections():
            yield from section.entries()

    def entry(self, raw_pattern: str) -> Entry:
        """
        Finds the entry attached to any section, or creates a new one in the
        untitled section.
        """
        pattern, _, _ = split_pattern(raw_pattern)
        attachment = self._registry.get(pattern)

        if attachment is not None:
            return attachment.section.entry(raw_pattern)

        return self.section("").entry(raw_pattern)

    def lines(self) -> List[str]:
        """Pattern lines of the file in order, without comments."""
        lines = []
        for entry in self.entries():
            attachment = self._registry[entry.pattern]
            lines.append(format_line(entry.pattern, attachment.effect, attachment.match))
        return lines

    def parse(self, content: str) -> "IgnoreFile":
        """
        Parses the content of a file in `.gitignore` format into this one.

        Parsing does not count as modification.
        """
        was_modified = self.is_modified
        title: Optional[str] = None
        section: Optional[Section] = None

        for line in _LINE_BREAK.split(content):
            if line.startswith("#"):
                # Any comment closes the section. Consecutive comments make a title.
                section = None
                comment = line[1:].strip()
                if comment:
                    title = comment if title is None else title + "\n" + comment
                continue

            parsed = parse_line(line)

            if title:
                section = self.section(title)
                title = None
            elif section is None:
                if parsed is None:
                    continue  # Blank line before section start
                section = self.section("")

            if parsed is not None:
                Entry(section, parsed.pattern, parsed.effect, parsed.match).attach()

        if title is not None:
            self.section(title)
        if not was_modified:
            self.reset_modified()

        return self

    def load(self, path: Union[str, Path]) -> "IgnoreFile":
        with open(path, "r", encoding="utf-8") as f:
            content = f.read()
        logger.debug("Loaded %s", path)
        return self.parse(content)

    def save(self, path: Union[str, Path], eol: str = os.linesep) -> "IgnoreFile":
        """
        Writes the file content to `path`, unless the file is not modified.

        Once written, the file is no longer modified.
        """
        if not self.is_modified:
            logger.debug("%s is up to date", path)
            return self

        with open(path, "w", encoding="utf-8", newline="") as f:
            f.write(self.to_string(eol))
        logger.debug("Saved %s", path)

        return self.reset_modified()

    def to_string(self, eol: str = os.linesep) -> str:
        out = ""

        for section in self.sections():
            if out:
                out += eol
                if not section.title:
                    out += "#" + eol
            out += section.to_string(eol)

        return out

    def _attach(self, entry: Entry, effect: Effect, match: Match) -> None:
        section = entry.section
        attachment = self._registry.get(entry.pattern)

        if attachment is not None and attachment.section is section:
            attachment.effect = effect
            attachment.match = match
        else:
            if attachment is not None:
                logger.debug("Moving %r from %r to %r", entry.pattern, attachment.section.title, section.title)
            # Drop a stale slot, so that the entry is appended at the end
            section._entries.pop(entry.pattern, None)
            self._registry[entry.pattern] = Attachment(section, effect, match)

        section._entries[entry.pattern] = entry

    def _detach(self, pattern: str) -> None:
        attachment = self._registry.pop(pattern, None)
        if attachment is not None:
            attachment.section._entries.pop(pattern, None)

    def _snapshot(self) -> FrozenSet[Tuple[str, str, Effect, Match]]:
        return frozenset(
            (attachment.section.title, pattern, attachment.effect, attachment.match)
            for pattern, attachment in self._registry.items()
        )

    def __str__(self) -> str:
        return self.to_string()
