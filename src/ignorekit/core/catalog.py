# src/ignorekit/core/catalog.py
import logging
from pathlib import Path
from typing import Iterable, List, Mapping, Optional, Union

import pathspec

from ignorekit.config import DEFAULT_SECTIONS, IGNORE_FILE_NAME, OUTPUT_SECTION
from ignorekit.core.file import IgnoreFile
from ignorekit.core.section import Section

logger = logging.getLogger(__name__)


def load_ignore_file(path: Union[str, Path]) -> IgnoreFile:
    """Loads an ignore file. A missing file is loaded as an empty one."""
    try:
        return IgnoreFile().load(path)
    except FileNotFoundError:
        logger.debug("%s not found, starting with an empty file", path)
        return IgnoreFile()


def declare_patterns(section: Section, patterns: Iterable[str]) -> Section:
    """Ignores each pattern in section. `!pattern` re-includes instead."""
    for pattern in patterns:
        section.entry(pattern).ignore(not pattern.startswith("!"))
    return section


def apply_sections(ignore_file: IgnoreFile, sections: Mapping[str, Iterable[str]]) -> IgnoreFile:
    """
    Reconciles each of the given sections, so that it contains exactly the
    listed patterns. Sections not listed are left intact.
    """
    for title, patterns in sections.items():
        patterns = list(patterns)
        logger.debug("Reconciling section %r with %d pattern(s)", title, len(patterns))
        ignore_file.section(title).replace(lambda section: declare_patterns(section, patterns))
    return ignore_file


def bootstrap_ignore_file(
    root_dir: Path,
    file_name: str = IGNORE_FILE_NAME,
    sections: Optional[Mapping[str, Iterable[str]]] = None,
    extra_patterns: Optional[List[str]] = None,
) -> bool:
    """
    Brings the ignore file within root_dir up to date.

    1. Loads it, or starts empty if missing.
    2. Reconciles the well-known sections.
    3. Puts extra patterns (like tool output) to a dedicated section.
    4. Saves the file, but only if something changed.

    Returns True if the file has been written.
    """
    ignore_path = root_dir / file_name
    ignore_file = load_ignore_file(ignore_path)

    apply_sections(ignore_file, DEFAULT_SECTIONS if sections is None else sections)

    if extra_patterns:
        declare_patterns(ignore_file.section(OUTPUT_SECTION), extra_patterns)

    if not ignore_file.is_modified:
        return False

    ignore_file.save(ignore_path)
    return True


def load_ignore_spec(ignore_file: IgnoreFile, extra_patterns: Optional[List[str]] = None) -> pathspec.PathSpec:
    """
    Creates a PathSpec object matching the paths the file ignores.
    Includes any extra patterns for runtime safety.
    """
    lines = ignore_file.lines()

    if extra_patterns:
        lines.extend(extra_patterns)

    return pathspec.PathSpec.from_lines("gitwildmatch", lines)
