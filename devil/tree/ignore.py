from typing import FrozenSet, Iterable

IgnoreSet = FrozenSet[str]


def make_ignore_set(*groups: Iterable[str]) -> IgnoreSet:
    """Merge any number of name collections into a single immutable ignore set."""
    names = set()
    for group in groups:
        names.update(name for name in group if name)
    return frozenset(names)


def should_include(display_name: str, ignore_set: IgnoreSet) -> bool:
    # Exact, case-sensitive match on the final path segment only, so an
    # ignored name is excluded at every depth of the tree.
    return display_name not in ignore_set
