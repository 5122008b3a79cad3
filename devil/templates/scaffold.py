# devil/templates/scaffold.py

"""
Entry point for creating a new project on disk.

scaffold() validates the request up front, so an unknown language or an
existing target directory fails before anything is created. After the target
directory is made the provider writes its files in a single forward pass;
a failure part way through leaves whatever was already written in place.
"""
import logging
from pathlib import Path
from typing import Optional, Union

from devil.errors import DirectoryExists, InvalidArgument, IOFailure
from devil.templates.base import TemplateSpec, parse_language
from devil.templates.registry import get_provider

logger = logging.getLogger(__name__)

CURRENT_DIRECTORY = "."
DEFAULT_PROJECTS_DIR = "Dev"


def resolve_project_path(
    name: str,
    base_dir: Union[str, Path, None] = None,
    cwd: Optional[Path] = None,
) -> Path:
    """
    Work out where a project called ``name`` lives.

    ``"."`` means the current working directory; anything else is placed
    under ``base_dir`` (relative paths are taken from ``cwd``).
    """
    cwd = Path(cwd) if cwd is not None else Path.cwd()
    if name == CURRENT_DIRECTORY:
        return cwd
    base = Path(base_dir if base_dir is not None else DEFAULT_PROJECTS_DIR)
    if not base.is_absolute():
        base = cwd / base
    return base / name


def scaffold(
    name: str,
    language: str,
    base_dir: Union[str, Path, None] = None,
    cwd: Optional[Path] = None,
) -> Path:
    """
    Create a starter project.

    Args:
        name: Project name, or "." to reuse the current directory.
        language: One of rust, c, c++ or cpp.
        base_dir: Parent directory for new projects, defaults to "Dev".
        cwd: Directory relative paths are resolved against.

    Returns:
        Path: The project directory.

    Raises:
        UnsupportedLanguage: unknown language identifier.
        InvalidArgument: empty project name, or "." used from a nameless directory.
        DirectoryExists: the target already exists.
        IOFailure: the directory or its files could not be written.
        SubprocessFailure: the language toolchain failed.
    """
    lang = parse_language(language)
    if not name.strip():
        raise InvalidArgument("Project name must not be empty")
    provider = get_provider(lang)
    target = resolve_project_path(name, base_dir, cwd)

    reuse_cwd = name == CURRENT_DIRECTORY
    if target.exists() and not reuse_cwd:
        raise DirectoryExists(target)

    project_name = target.resolve().name if reuse_cwd else name
    if not project_name.strip():
        raise InvalidArgument(f"Cannot use {target} as a project directory: it has no name")
    spec = TemplateSpec(name=project_name, language=lang, target_dir=target)

    try:
        target.mkdir(parents=True, exist_ok=reuse_cwd)
    except OSError as e:
        raise IOFailure(f"Failed to create project directory {target}: {e}") from e

    logger.info(f"Scaffolding {lang.value} project '{project_name}' in {target}")
    provider.scaffold(spec)
    return target
