# devil/errors.py

"""
Exception hierarchy for the devil command-line tool.

Every failure the library can report derives from DevilError, so the CLI
only has to catch one type to turn it into a message and an exit code.
"""


class DevilError(Exception):
    """Base class for all errors raised by devil."""


class InvalidArgument(DevilError):
    """Malformed or missing command-line arguments."""

    def __init__(self, message: str, usage: str = ""):
        super().__init__(message)
        self.usage = usage


class DirectoryExists(DevilError):
    """The scaffold target directory already exists."""

    def __init__(self, path):
        super().__init__(f"Project directory already exists: {path}")
        self.path = path


class UnsupportedLanguage(DevilError):
    """The requested project language has no template provider."""

    def __init__(self, language: str):
        super().__init__(f"Language not supported: {language}")
        self.language = language


class IOFailure(DevilError):
    """A local file system read, write or create failed."""


class SubprocessFailure(DevilError):
    """An external toolchain command could not run or returned non-zero."""

    def __init__(self, command, returncode=None, message: str = ""):
        cmd = " ".join(command)
        if not message:
            message = f"'{cmd}' failed with exit status {returncode}"
        super().__init__(message)
        self.command = list(command)
        self.returncode = returncode
