# devil/templates/base.py

"""
Common types for project template providers.

Classes:
    Language: The closed set of languages devil can scaffold.
    TemplateSpec: What to scaffold and where.
    TemplateProvider: Interface every language provider implements.
"""
from abc import ABC, abstractmethod
from enum import Enum
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field

from devil.errors import UnsupportedLanguage


class Language(str, Enum):
    RUST = "rust"
    C = "c"
    CPP = "cpp"


LANGUAGE_ALIASES = {
    "rust": Language.RUST,
    "c": Language.C,
    "c++": Language.CPP,
    "cpp": Language.CPP,
}


def parse_language(value: str) -> Language:
    """
    Map a user supplied language identifier onto a Language.

    Raises:
        UnsupportedLanguage: if the identifier is not recognised.
    """
    if isinstance(value, Language):
        return value
    try:
        return LANGUAGE_ALIASES[value.strip().lower()]
    except KeyError:
        raise UnsupportedLanguage(value) from None


class TemplateSpec(BaseModel):
    """
    A request to materialise a starter project.

    Attributes:
        name: Project name substituted into the build manifest.
        language: Target language.
        target_dir: Directory the project files are written into.
    """

    model_config = ConfigDict(frozen=True)

    name: str = Field(min_length=1)
    language: Language
    target_dir: Path


class TemplateProvider(ABC):
    """Creates the starter files for one language inside an existing directory."""

    language: Language

    @abstractmethod
    def scaffold(self, spec: TemplateSpec) -> None:
        """
        Populate ``spec.target_dir``.

        Raises:
            IOFailure: if a file cannot be written.
            SubprocessFailure: if an external toolchain command fails.
        """
