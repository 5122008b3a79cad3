"""Directory tree rendering with name-based ignore filtering."""

from .ignore import IgnoreSet, make_ignore_set, should_include
from .renderer import DirectoryEntry, iter_tree, list_entries, print_tree, render

__all__ = [
    "IgnoreSet",
    "make_ignore_set",
    "should_include",
    "DirectoryEntry",
    "iter_tree",
    "list_entries",
    "print_tree",
    "render",
]
