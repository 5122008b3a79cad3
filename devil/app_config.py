import configparser
import logging
import os
from pathlib import Path
from typing import List, Optional, Union

from devil.errors import InvalidArgument

logger = logging.getLogger(__name__)

CONFIG_ENV_VAR = "DEVIL_CONFIG"
LOCAL_CONFIG_NAME = "devil.ini"
USER_CONFIG_PATH = Path("~/.config/devil/devil.ini")

DEFAULTS = {
    "Projects": {
        "base_dir": "Dev",
    },
    "Status": {
        "ignore": "",
    },
    "Logging": {
        "log_level": "WARNING",
        "log_to_file": "false",
        "log_file": "logs/devil.log",
    },
}


class AppConfig:
    """
    Settings interface backed by an INI file.
    Values missing from the file fall back to DEFAULTS.
    """

    def __init__(self, config_file: Optional[Path] = None):
        self.config_file = config_file
        self.config = configparser.ConfigParser(interpolation=None)
        self.config.read_dict(DEFAULTS)
        if config_file is not None:
            self._read(config_file)

    def _read(self, config_file: Path) -> None:
        try:
            with open(config_file, encoding="utf-8") as f:
                self.config.read_file(f)
        except (OSError, configparser.Error) as e:
            raise InvalidArgument(f"Could not read config file {config_file}: {e}") from e
        logger.debug(f"Loaded configuration from {config_file}")

    @classmethod
    def load(cls, explicit: Union[str, Path, None] = None, cwd: Optional[Path] = None) -> "AppConfig":
        """
        Find and load the configuration.

        Lookup order: ``explicit``, $DEVIL_CONFIG, ./devil.ini,
        ~/.config/devil/devil.ini. An explicitly named file must exist;
        the others are optional.
        """
        if explicit:
            return cls(Path(explicit))
        env_path = os.environ.get(CONFIG_ENV_VAR)
        if env_path:
            return cls(Path(env_path))
        cwd = Path(cwd) if cwd is not None else Path.cwd()
        for candidate in (cwd / LOCAL_CONFIG_NAME, USER_CONFIG_PATH.expanduser()):
            if candidate.is_file():
                return cls(candidate)
        return cls()

    def get(self, section: str, key: str, fallback: Optional[str] = None) -> Optional[str]:
        return self.config.get(section, key, fallback=fallback)

    def get_bool(self, section: str, key: str, fallback: bool = False) -> bool:
        try:
            return self.config.getboolean(section, key, fallback=fallback)
        except ValueError as e:
            raise InvalidArgument(f"[{section}] {key}: {e}") from e

    def get_list(self, section: str, key: str, fallback: Optional[List[str]] = None) -> List[str]:
        """Split a comma-separated value into a list of stripped, non-empty strings."""
        value = self.get(section, key)
        if value is None:
            return fallback or []
        return [item.strip() for item in value.split(",") if item.strip()]

    def get_path(self, section: str, key: str) -> Path:
        """
        Get a path setting. Relative paths are resolved against the directory
        holding the config file, or left relative when no file was loaded.
        """
        value = self.get(section, key)
        if not value:
            raise InvalidArgument(f"Path key '{key}' not found or is empty in the [{section}] section.")
        path = Path(value).expanduser()
        if not path.is_absolute() and self.config_file is not None:
            path = Path(self.config_file).parent / path
        return path

    @property
    def projects_dir(self) -> Path:
        return self.get_path("Projects", "base_dir")

    @property
    def default_ignores(self) -> List[str]:
        return self.get_list("Status", "ignore")

    @property
    def log_level(self) -> str:
        return self.get("Logging", "log_level", "WARNING")

    @property
    def log_file(self) -> Optional[Path]:
        if not self.get_bool("Logging", "log_to_file"):
            return None
        return self.get_path("Logging", "log_file")
