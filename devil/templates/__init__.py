"""Starter project templates, one provider per supported language."""

from .base import Language, TemplateProvider, TemplateSpec, parse_language
from .cmake import CppProvider, CProvider
from .registry import get_provider, register_provider, registered_languages
from .rust import RustProvider
from .scaffold import resolve_project_path, scaffold

__all__ = [
    "Language",
    "TemplateProvider",
    "TemplateSpec",
    "parse_language",
    "CProvider",
    "CppProvider",
    "RustProvider",
    "get_provider",
    "register_provider",
    "registered_languages",
    "resolve_project_path",
    "scaffold",
]
