"""devil public API.

Project scaffolding for rust, c and c++ plus a filtered directory tree view.
The command-line front end lives in devil.cli; keep argument handling out of
the library modules.
"""

__version__ = "0.1.0"

from .errors import (
    DevilError,
    DirectoryExists,
    InvalidArgument,
    IOFailure,
    SubprocessFailure,
    UnsupportedLanguage,
)
from .templates import Language, TemplateSpec, get_provider, scaffold
from .tree import iter_tree, make_ignore_set, print_tree, render, should_include

__all__ = [
    "__version__",
    "DevilError",
    "DirectoryExists",
    "InvalidArgument",
    "IOFailure",
    "SubprocessFailure",
    "UnsupportedLanguage",
    "Language",
    "TemplateSpec",
    "get_provider",
    "scaffold",
    "iter_tree",
    "make_ignore_set",
    "print_tree",
    "render",
    "should_include",
]
