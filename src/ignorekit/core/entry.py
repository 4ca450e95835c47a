# src/ignorekit/core/entry.py
from dataclasses import dataclass
from typing import TYPE_CHECKING, Optional

from ignorekit.core.codec import format_line
from ignorekit.models import Effect, Match

if TYPE_CHECKING:
    from ignorekit.core.file import IgnoreFile
    from ignorekit.core.section import Section


@dataclass
class Attachment:
    """Registry record of an attached pattern. One per pattern per file."""
    section: "Section"
    effect: Effect
    match: Match


class Entry:
    """
    A handle of a pattern within some section of an ignore file.

    The handle always belongs to the section it was obtained from, while the
    pattern itself may be attached to another section, or to none at all.
    New handles are detached until `attach()`, `ignore()` or `include()` called.

    Effect and match values set on a detached handle, or given as markers to
    `Section.entry()`, are kept locally until the handle is attached. Values
    set on an attached handle go straight to the file. Without local values,
    the ones of the attached pattern are reported.
    """

    def __init__(
        self,
        section: "Section",
        pattern: str,
        effect: Optional[Effect] = None,
        match: Optional[Match] = None,
    ):
        self._section = section
        self._pattern = pattern
        self._effect = effect
        self._match = match

    @property
    def file(self) -> "IgnoreFile":
        return self._section.file

    @property
    def section(self) -> "Section":
        return self._section

    @property
    def pattern(self) -> str:
        return self._pattern

    @property
    def current_section(self) -> Optional["Section"]:
        attachment = self._attachment()
        return attachment.section if attachment else None

    @property
    def is_attached(self) -> bool:
        return self.current_section is self._section

    @property
    def is_detached(self) -> bool:
        return not self.is_attached

    @property
    def effect(self) -> Effect:
        if self._effect is not None:
            return self._effect
        attachment = self._attachment()
        return attachment.effect if attachment else Effect.IGNORE

    @property
    def match(self) -> Match:
        if self._match is not None:
            return self._match
        attachment = self._attachment()
        return attachment.match if attachment else Match.ALL

    @property
    def is_ignored(self) -> bool:
        return self.effect is Effect.IGNORE

    def set_effect(self, effect: Effect) -> "Entry":
        effect = Effect(effect)
        attachment = self._own_attachment()
        if attachment:
            attachment.effect = effect
            self._effect = None
        else:
            self._effect = effect
        self._section._declare(self._pattern)
        return self

    def set_match(self, match: Match) -> "Entry":
        match = Match(match)
        attachment = self._own_attachment()
        if attachment:
            attachment.match = match
            self._match = None
        else:
            self._match = match
        self._section._declare(self._pattern)
        return self

    def attach(self) -> "Section":
        """
        Attaches the pattern to this entry's section, moving it from the
        section it is currently attached to.
        """
        self.file._attach(self, self.effect, self.match)
        # From now on the attached values are reported
        self._effect = None
        self._match = None
        self._section._declare(self._pattern)
        return self._section

    def ignore(self, ignore: bool = True) -> "Section":
        """Attaches the pattern, either ignoring the matching paths or re-including them."""
        self.set_effect(Effect.IGNORE if ignore else Effect.INCLUDE)
        return self.attach()

    def include(self) -> "Section":
        return self.ignore(False)

    def remove(self) -> "Section":
        """Removes the pattern from the file, unless it is attached to another section."""
        if self.is_attached:
            self.file._detach(self._pattern)
        return self._section

    def _attachment(self) -> Optional[Attachment]:
        return self.file._registry.get(self._pattern)

    def _own_attachment(self) -> Optional[Attachment]:
        attachment = self._attachment()
        if attachment and attachment.section is self._section:
            return attachment
        return None

    def __str__(self) -> str:
        return format_line(self._pattern, self.effect, self.match)

    def __repr__(self) -> str:
        return f"Entry({self._section.title!r}, {str(self)!r})"
