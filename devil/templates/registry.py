from typing import Dict

from devil.templates.base import Language, TemplateProvider, parse_language
from devil.templates.cmake import CppProvider, CProvider
from devil.templates.rust import RustProvider

_providers: Dict[Language, TemplateProvider] = {}


def register_provider(provider: TemplateProvider) -> None:
    _providers[provider.language] = provider


def get_provider(language) -> TemplateProvider:
    """Return the provider for a Language or a raw identifier such as ``"c++"``."""
    return _providers[parse_language(language)]


def registered_languages():
    return sorted(lang.value for lang in _providers)


for _provider in (RustProvider(), CProvider(), CppProvider()):
    register_provider(_provider)
