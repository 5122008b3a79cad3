# devil/cli.py

"""
Command-line interface for devil.

    devil status <path> [--ignore <folder1> <folder2> ...]
    devil project <project_name> <project_language>
    devil help
    devil version

parse_args() turns an argument list into a request model without touching
the file system; main() loads configuration, sets up logging and dispatches
the request. Every DevilError ends the run with exit code 1.
"""
import argparse
import logging
import os
import sys
from pathlib import Path
from typing import List, Optional, Union

from pydantic import BaseModel, Field

from devil import __version__
from devil.app_config import AppConfig
from devil.errors import DevilError, InvalidArgument
from devil.templates import scaffold
from devil.tree import make_ignore_set, print_tree
from devil.utils.logging_config import setup_logging

logger = logging.getLogger(__name__)

PROG = "devil"

USAGE = """Usage: devil <command> [options]
Commands:
  project <project_name> <project_language>
  status <path> [--ignore <folder1> <folder2> ...]
  help
  version
"""

STATUS_USAGE = "devil status <path> [--ignore <folder1> <folder2> ...]"
PROJECT_USAGE = "devil project <project_name> <project_language>"


class Request(BaseModel):
    verbose: bool = False
    config_file: Optional[Path] = None


class StatusRequest(Request):
    path: str
    ignore: List[str] = Field(default_factory=list)


class ProjectRequest(Request):
    name: str
    language: str


class HelpRequest(Request):
    pass


class VersionRequest(Request):
    pass


AnyRequest = Union[StatusRequest, ProjectRequest, HelpRequest, VersionRequest]


class _ArgumentParser(argparse.ArgumentParser):
    """ArgumentParser that raises InvalidArgument instead of exiting with status 2."""

    def error(self, message):
        raise InvalidArgument(message, usage=self.format_usage())


def build_parser() -> argparse.ArgumentParser:
    parser = _ArgumentParser(prog=PROG, usage="devil [-v] [--config FILE] <command> [options]", add_help=False)
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable verbose logging")
    parser.add_argument("--config", help="Path to a devil.ini configuration file")

    subparsers = parser.add_subparsers(dest="command")

    status = subparsers.add_parser("status", usage=STATUS_USAGE, add_help=False)
    status.add_argument("path", help="Directory to render, '.' for the current directory")
    status.add_argument("--ignore", nargs="*", action="extend", default=[], metavar="NAME",
                        help="Entry names to leave out of the tree")

    project = subparsers.add_parser("project", usage=PROJECT_USAGE, add_help=False)
    project.add_argument("name", help="Project name, or '.' for the current directory")
    project.add_argument("language", help="rust, c, c++ or cpp")

    subparsers.add_parser("help", add_help=False)
    subparsers.add_parser("version", add_help=False)
    return parser


def _split_ignore_names(argv: List[str]) -> List[str]:
    """
    Rewrite ``--ignore a -b c`` as ``--ignore --ignore=a --ignore=-b --ignore=c``.

    Names run until the next token starting with "--", so a name with a single
    leading dash is taken as a name rather than an unknown option.
    """
    out = []
    collecting = False
    for token in argv:
        if token == "--ignore":
            collecting = True
            out.append(token)
        elif collecting and not token.startswith("--"):
            out.append(f"--ignore={token}")
        else:
            collecting = False
            out.append(token)
    return out


def parse_args(argv: List[str]) -> AnyRequest:
    """
    Parse command-line arguments (without the program name) into a request.

    Raises:
        InvalidArgument: on unknown commands, missing or extra arguments.
    """
    args = build_parser().parse_args(_split_ignore_names(argv))
    common = {"verbose": args.verbose, "config_file": args.config}

    if args.command == "status":
        return StatusRequest(path=args.path, ignore=args.ignore, **common)
    if args.command == "project":
        return ProjectRequest(name=args.name, language=args.language, **common)
    if args.command == "version":
        return VersionRequest(**common)
    return HelpRequest(**common)


def run(request: AnyRequest, config: AppConfig) -> None:
    if isinstance(request, StatusRequest):
        ignore_set = make_ignore_set(config.default_ignores, request.ignore)
        root = Path.cwd() if request.path == "." else Path(request.path)
        if not root.is_dir():
            logger.info(f"{root} is not a directory, nothing to show")
        print_tree(root, ignore_set)
    elif isinstance(request, ProjectRequest):
        project_path = scaffold(request.name, request.language, base_dir=config.projects_dir)
        print(f"Created project at: {project_path}")
    elif isinstance(request, VersionRequest):
        print(f"{PROG} v{__version__}")
    else:
        print(USAGE, end="")


def main(argv: Optional[List[str]] = None) -> int:
    if argv is None:
        argv = sys.argv[1:]

    try:
        request = parse_args(argv)
    except InvalidArgument as e:
        print(f"Error: {e}", file=sys.stderr)
        if e.usage:
            print(e.usage.strip(), file=sys.stderr)
        return 1

    try:
        config = AppConfig.load(request.config_file)
        level = logging.DEBUG if request.verbose else config.log_level
        setup_logging(level, log_file=config.log_file)
        run(request, config)
    except DevilError as e:
        logger.debug(f"{type(e).__name__} while handling {type(request).__name__}", exc_info=True)
        print(f"Error: {e}", file=sys.stderr)
        return 1
    except BrokenPipeError:
        # stdout was closed early, e.g. piped into head
        _discard_stdout()
        return 1
    except UnicodeEncodeError as e:
        print(f"Error: stdout cannot display the tree ({e.encoding}); set PYTHONIOENCODING=utf-8", file=sys.stderr)
        return 1
    return 0


def _discard_stdout() -> None:
    # Point stdout at devnull so the interpreter does not fail again flushing it on exit.
    try:
        stdout_fd = sys.stdout.fileno()
    except (AttributeError, OSError, ValueError):
        return
    devnull = os.open(os.devnull, os.O_WRONLY)
    os.dup2(devnull, stdout_fd)
    os.close(devnull)


if __name__ == "__main__":
    sys.exit(main())
