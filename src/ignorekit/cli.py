# src/ignorekit/cli.py
import sys
import argparse
import logging
import os
from pathlib import Path

# Module imports
from ignorekit.config import DEFAULT_SECTIONS, IGNORE_FILE_NAME
from ignorekit.core.catalog import apply_sections, declare_patterns, load_ignore_file, load_ignore_spec
from ignorekit.utils.paths import ignore_path

def create_arg_parser():
    parser = argparse.ArgumentParser(
        description="Keep the sections of your project's ignore file up to date, without touching the rest of it."
    )
    parser.add_argument("root_dir", type=str, nargs="?", default=os.getcwd(), help="Project root directory")
    parser.add_argument("-f", "--file", type=str, default=IGNORE_FILE_NAME, help=f"Ignore file name (default: {IGNORE_FILE_NAME})")
    parser.add_argument("-s", "--section", type=str, default="", help="Section title to add patterns to (default: untitled)")
    parser.add_argument(
        "-a", "--add",
        action="append",
        default=[],
        metavar="PATTERN",
        help="Pattern to ignore. Prefix with '!' to re-include",
    )
    parser.add_argument(
        "-p", "--path",
        action="append",
        default=[],
        metavar="PATH",
        help="File or directory under root_dir to ignore, anchored at the root",
    )
    parser.add_argument("-r", "--remove", action="append", default=[], metavar="PATTERN", help="Pattern to remove")
    parser.add_argument("--replace", action="store_true", help="Make the section contain exactly the added patterns")
    parser.add_argument("--defaults", action="store_true", help="Reconcile the well-known sections")
    parser.add_argument("--check", action="append", default=[], metavar="PATH", help="Report whether the path is ignored")
    parser.add_argument("--dry-run", action="store_true", help="Print the resulting file instead of saving it")
    parser.add_argument("-v", "--verbose", action="store_true", help="Verbose logging")
    return parser

def main():
    try:
        # 1. Setup
        parser = create_arg_parser()
        args = parser.parse_args()

        logging.basicConfig(
            level=logging.DEBUG if args.verbose else logging.WARNING,
            format="%(levelname)s %(name)s: %(message)s",
        )

        root_dir = Path(args.root_dir).resolve()
        if not root_dir.is_dir():
            print(f"Error: Invalid directory '{root_dir}'", file=sys.stderr)
            sys.exit(1)

        ignore_file_path = root_dir / args.file
        ignore_file = load_ignore_file(ignore_file_path)

        # 2. Declare the wanted state
        if args.defaults:
            apply_sections(ignore_file, DEFAULT_SECTIONS)

        patterns = list(args.add)
        for path in args.path:
            pattern = ignore_path(root_dir, path)
            if (root_dir / path).is_dir():
                pattern += "/"
            patterns.append(pattern)

        if args.replace:
            ignore_file.section(args.section).replace(lambda s: declare_patterns(s, patterns))
        elif patterns:
            declare_patterns(ignore_file.section(args.section), patterns)

        for pattern in args.remove:
            ignore_file.entry(pattern).remove()

        # 3. Output
        if args.dry_run:
            print(ignore_file.to_string("\n"), end="")
        elif ignore_file.is_modified:
            ignore_file.save(ignore_file_path)
            print(f"Updated: {ignore_file_path.name}")
        else:
            print(f"Up to date: {ignore_file_path.name}")

        # 4. Checks
        if args.check:
            spec = load_ignore_spec(ignore_file)
            for path in args.check:
                status = "ignored" if spec.match_file(path) else "not ignored"
                print(f"{path}: {status}")

    except KeyboardInterrupt:
        print("\nCancelled.")
        sys.exit(1)

    except Exception as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)

if __name__ == "__main__":
    main()
