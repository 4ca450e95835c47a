# tests/test_entry.py
import pytest

from ignorekit.core.file import IgnoreFile
from ignorekit.models import Effect, Match

@pytest.fixture
def ignore_file():
    return IgnoreFile()

# --- Test 1: ignore() ---

def test_ignore_adds_pattern(ignore_file):
    entry = ignore_file.section("test").entry("pattern")
    assert entry.is_detached

    entry.ignore()

    assert ignore_file.section("test").entry("pattern") is entry
    assert entry.is_attached
    assert entry.effect is Effect.IGNORE
    assert ignore_file.is_modified
    assert ignore_file.to_string("\n") == "# test\npattern\n"

def test_ignore_moves_pattern_to_another_section(ignore_file):
    entry = ignore_file.parse("!pattern").section("test").entry("pattern")
    assert entry.effect is Effect.INCLUDE
    assert entry.current_section is ignore_file.section("")

    entry.ignore()

    assert ignore_file.section("test").entry("pattern") is entry
    assert entry.effect is Effect.IGNORE
    assert entry.section.title == "test"
    assert list(ignore_file.section("").entries()) == []
    assert list(ignore_file.section("test").entries()) == [entry]
    assert ignore_file.is_modified
    assert ignore_file.to_string("\n") == "# test\npattern\n"

def test_ignore_false_re_includes(ignore_file):
    entry = ignore_file.parse("pattern").section("test").entry("pattern")

    entry.ignore(False)

    assert entry.effect is Effect.INCLUDE
    assert not entry.is_ignored
    assert ignore_file.to_string("\n") == "# test\n!pattern\n"

def test_include_is_ignore_false(ignore_file):
    ignore_file.section("").entry("pattern").include()
    assert ignore_file.to_string("\n") == "!pattern\n"

def test_ignore_directories(ignore_file):
    ignore_file.section("deps").entry("node_modules/").ignore()
    assert ignore_file.to_string("\n") == "# deps\nnode_modules/\n"

def test_reattach_unchanged_is_not_modification(ignore_file):
    ignore_file.parse("# test\na\nb/\n")

    ignore_file.section("test").entry("a").ignore()
    ignore_file.section("test").entry("b/").ignore()

    assert not ignore_file.is_modified
    assert ignore_file.to_string("\n") == "# test\na\nb/\n"

def test_reattach_keeps_position(ignore_file):
    ignore_file.parse("a\nb\nc\n")

    ignore_file.section("").entry("a").ignore(False)

    assert list(ignore_file.section("").patterns()) == ["a", "b", "c"]
    assert ignore_file.to_string("\n") == "!a\nb\nc\n"

# --- Test 2: effect and match ---

def test_detached_entry_reports_attached_values(ignore_file):
    ignore_file.parse("# other\n!dir/\n")

    entry = ignore_file.section("test").entry("dir")

    assert entry.is_detached
    assert entry.effect is Effect.INCLUDE
    assert entry.match is Match.DIRS

def test_new_entry_defaults(ignore_file):
    entry = ignore_file.section("").entry("pattern")
    assert entry.effect is Effect.IGNORE
    assert entry.match is Match.ALL
    assert entry.current_section is None

def test_set_match_of_attached_entry(ignore_file):
    ignore_file.parse("build")
    entry = ignore_file.section("").entry("build")

    entry.set_match(Match.DIRS)

    assert ignore_file.is_modified
    assert ignore_file.to_string("\n") == "build/\n"

def test_set_match_to_same_value_is_not_modification(ignore_file):
    ignore_file.parse("build/")
    ignore_file.section("").entry("build").set_match(Match.DIRS)
    assert not ignore_file.is_modified

def test_set_effect_of_detached_entry_changes_nothing(ignore_file):
    ignore_file.parse("pattern")

    entry = ignore_file.section("test").entry("pattern").set_effect(Effect.INCLUDE)

    assert entry.effect is Effect.INCLUDE
    assert not ignore_file.is_modified
    assert ignore_file.to_string("\n") == "pattern\n\n# test\n"

def test_reverted_change_is_not_modification(ignore_file):
    ignore_file.parse("pattern")
    entry = ignore_file.section("").entry("pattern")

    entry.ignore(False)
    assert ignore_file.is_modified

    entry.ignore()
    assert not ignore_file.is_modified

def test_str(ignore_file):
    entry = ignore_file.section("").entry("!#odd/")
    assert str(entry) == "!#odd/"

# --- Test 3: remove() ---

def test_remove_entry(ignore_file):
    entry = ignore_file.parse("pattern").section("").entry("pattern")
    assert entry.is_attached

    entry.remove()

    assert entry.is_detached
    assert entry.current_section is None
    assert ignore_file.section("").entry("pattern").is_detached
    assert list(ignore_file.section("").entries()) == []
    assert ignore_file.section("test").entry("pattern").is_detached
    assert list(ignore_file.section("test").entries()) == []
    assert ignore_file.is_modified
    assert ignore_file.section("").entry("pattern").section.title == ""
    assert ignore_file.section("test").entry("pattern").section.title == "test"
    assert ignore_file.to_string("\n") == "# test\n"

def test_remove_from_another_section_is_noop(ignore_file):
    ignore_file.parse("pattern")

    ignore_file.section("test").entry("pattern").remove()

    assert not ignore_file.is_modified
    assert list(ignore_file.section("").patterns()) == ["pattern"]

def test_removed_pattern_can_be_recreated(ignore_file):
    ignore_file.parse("pattern")
    ignore_file.section("").entry("pattern").remove()

    ignore_file.section("later").entry("pattern/").ignore()

    assert ignore_file.to_string("\n") == "# later\npattern/\n"

# --- Test 4: Handles of the same pattern ---

def test_handles_agree_after_update_through_another_one(ignore_file):
    ignore_file.parse("x\n")

    ignore_file.section("").entry("x/").set_effect(Effect.INCLUDE)

    assert ignore_file.to_string("\n") == "!x\n"
    assert [(e.pattern, e.effect, e.match) for e in ignore_file.section("").entries()] == [
        ("x", Effect.INCLUDE, Match.ALL),
    ]
    assert ignore_file.entry("x").effect is Effect.INCLUDE

    ignore_file.section("").entry("x").attach()

    assert ignore_file.to_string("\n") == "!x\n"

def test_entries_match_reparsed_file_after_updates(ignore_file):
    ignore_file.parse("# test\na\nb/\n")
    section = ignore_file.section("test")
    early = section.entry("a")

    section.entry("!a").ignore(False)
    section.entry("b").set_match(Match.ALL)

    def state(f):
        return [(e.current_section.title, e.pattern, e.effect, e.match) for e in f.entries()]

    reparsed = IgnoreFile().parse(ignore_file.to_string("\n"))
    assert state(ignore_file) == state(reparsed)
    assert early.effect is Effect.INCLUDE
