# src/ignorekit/utils/paths.py
from pathlib import Path
from typing import Union


def ignore_path(root_dir: Union[str, Path], file_path: Union[str, Path]) -> str:
    """
    Creates a pattern matching a file or directory relative to root_dir.
    The pattern starts with `/`, so it matches at the root only.
    """
    root_dir = Path(root_dir).resolve()
    file_path = (root_dir / file_path).resolve()

    try:
        rel_path = file_path.relative_to(root_dir)
    except ValueError:
        raise ValueError(f"Path outside the root dir: {file_path}") from None

    if rel_path == Path("."):
        raise ValueError(f"Path is the root dir itself: {file_path}")

    return "/" + rel_path.as_posix()
