from pathlib import Path
from typing import Any, Dict
import yaml

from utils.logger import LEVELS

# Used when no config file overrides it
DEFAULT_OS_TYPE = "Windows"
DEFAULT_LOG_LEVEL = "info"
DEFAULT_LOG_DIR = "Logs"


class AppConfig:
    """Settings for one run, read from an optional YAML file."""

    def __init__(self, cfg_path: Path) -> None:
        self.__cfg = Path(cfg_path)
        self.__os_type = DEFAULT_OS_TYPE
        self.__log_level = DEFAULT_LOG_LEVEL
        self.__log_to_file = False
        self.__log_dir = DEFAULT_LOG_DIR
        self.__exists = self.__cfg.is_file()
        if self.__exists:
            self.__apply(self.load_config())

    def os_type(self) -> str: return self.__os_type

    def log_level(self) -> str: return self.__log_level

    def log_to_file(self) -> bool: return self.__log_to_file

    def log_dir(self) -> str: return self.__log_dir

    def exists(self) -> bool: return self.__exists

    def path(self) -> Path: return self.__cfg

    def load_config(self) -> Dict[str, Any]:
        with self.__cfg.open(encoding="utf-8") as f:
            cfg = yaml.safe_load(f)
        if cfg is None:
            return {}
        if not isinstance(cfg, dict):
            raise ValueError(f"{self.__cfg}: expected a mapping at top level")
        return cfg

    def __apply(self, cfg: Dict[str, Any]) -> None:
        os_type = cfg.get("os_type", DEFAULT_OS_TYPE)
        if not isinstance(os_type, str):
            raise ValueError(f"{self.__cfg}: os_type must be a string, got {os_type!r}")
        log_level = str(cfg.get("log_level", DEFAULT_LOG_LEVEL)).lower()
        if log_level not in LEVELS:
            raise ValueError(f"{self.__cfg}: unknown log_level {log_level!r}")
        log_to_file = cfg.get("log_to_file", False)
        if not isinstance(log_to_file, bool):
            raise ValueError(f"{self.__cfg}: log_to_file must be true or false, got {log_to_file!r}")
        log_dir = cfg.get("log_dir", DEFAULT_LOG_DIR)
        if not isinstance(log_dir, str) or not log_dir:
            raise ValueError(f"{self.__cfg}: log_dir must be a non-empty string, got {log_dir!r}")
        self.__os_type = os_type
        self.__log_level = log_level
        self.__log_to_file = log_to_file
        self.__log_dir = log_dir
