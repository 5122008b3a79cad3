# devil/tree/renderer.py

"""
Directory tree rendering.

Walks a directory depth-first and produces one line per entry, drawn with
box-drawing branch glyphs:

    ├── a.txt
    ├── b.txt
    └── node_modules
        └── x.txt

Entries whose display name is in the ignore set are dropped before sorting,
so an ignored directory is never descended into. Siblings are ordered by
display name in codepoint order, which keeps output identical across runs
and platforms. Symbolic links are listed but never followed.
"""
import logging
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Iterator, List, TextIO, Union

from devil.errors import IOFailure
from devil.tree.ignore import IgnoreSet, should_include

logger = logging.getLogger(__name__)

BRANCH = "├── "
LAST_BRANCH = "└── "
PIPE = "│   "
SPACE = "    "


@dataclass(frozen=True)
class DirectoryEntry:
    path: Path
    name: str
    is_dir: bool

    @classmethod
    def from_path(cls, path: Path) -> "DirectoryEntry":
        # is_symlink() first: a link to a directory is rendered as a leaf.
        return cls(path=path, name=path.name, is_dir=not path.is_symlink() and path.is_dir())


def list_entries(directory: Path, ignore_set: IgnoreSet) -> List[DirectoryEntry]:
    """
    Return the filtered, sorted children of a directory.

    Raises:
        IOFailure: if the directory cannot be read.
    """
    try:
        children = [DirectoryEntry.from_path(p) for p in directory.iterdir()]
    except OSError as e:
        raise IOFailure(f"Failed to read directory {directory}: {e}") from e

    entries = [e for e in children if should_include(e.name, ignore_set)]
    entries.sort(key=lambda e: e.name)
    return entries


def iter_tree(root: Union[str, Path], ignore_set: IgnoreSet) -> Iterator[str]:
    """
    Lazily yield the rendered lines for everything below ``root``.

    The root itself is not printed. A root that is not a directory yields
    nothing. Any read failure below it, including a subdirectory that
    vanishes mid-walk, aborts the walk with IOFailure.
    """
    root = Path(root)
    if not root.is_dir():
        logger.debug(f"{root} is not a directory, nothing to render")
        return
    yield from _walk(root, ignore_set, "")


def _walk(directory: Path, ignore_set: IgnoreSet, prefix: str) -> Iterator[str]:
    entries = list_entries(directory, ignore_set)
    for index, entry in enumerate(entries):
        is_last = index == len(entries) - 1
        yield prefix + (LAST_BRANCH if is_last else BRANCH) + entry.name
        if entry.is_dir:
            yield from _walk(entry.path, ignore_set, prefix + (SPACE if is_last else PIPE))


def render(root: Union[str, Path], ignore_set: IgnoreSet) -> List[str]:
    return list(iter_tree(root, ignore_set))


def print_tree(root: Union[str, Path], ignore_set: IgnoreSet, stream: TextIO = None) -> int:
    """
    Write the tree below ``root`` to ``stream`` line by line as it is walked.

    Args:
        root: Directory to render.
        ignore_set: Display names to exclude.
        stream: Output sink, defaults to stdout.

    Returns:
        int: Number of lines written.
    """
    stream = stream or sys.stdout
    count = 0
    for line in iter_tree(root, ignore_set):
        stream.write(line + "\n")
        count += 1
    logger.debug(f"Rendered {count} entries below {root}")
    return count
