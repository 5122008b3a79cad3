# devil/templates/rust.py

import logging
import subprocess

from devil.errors import SubprocessFailure
from devil.templates.base import Language, TemplateProvider, TemplateSpec

logger = logging.getLogger(__name__)

CARGO_INIT = ["cargo", "init", "--bin", "--quiet"]


class RustProvider(TemplateProvider):
    """Delegates to ``cargo init`` instead of writing files itself."""

    language = Language.RUST

    def __init__(self, command=None):
        self.command = list(command or CARGO_INIT)

    def scaffold(self, spec: TemplateSpec) -> None:
        logger.info(f"Running {' '.join(self.command)} in {spec.target_dir}")
        try:
            result = subprocess.run(self.command, cwd=spec.target_dir)
        except OSError as e:
            # cargo not installed or not executable
            raise SubprocessFailure(self.command, message=f"Could not run '{self.command[0]}': {e}") from e
        if result.returncode != 0:
            raise SubprocessFailure(self.command, returncode=result.returncode)
