from utils.pattern import Singleton
import logging
import sys
from datetime import datetime
from pathlib import Path

LEVELS = {
    "debug": logging.DEBUG,
    "info": logging.INFO,
    "warn": logging.WARNING,
    "error": logging.ERROR,
    "fatal": logging.CRITICAL,
}


class ScreenFormatter(logging.Formatter):
    GREY = "\x1b[38;20m"
    BLUE = "\x1b[34;20m"
    YELLOW = "\x1b[33;20m"
    GREEN = "\x1b[32;20m"
    RED = "\x1b[31;20m"
    BOLD_RED = "\x1b[31;1m"
    RESET = "\x1b[0m"

    LAYOUT = f"{GREEN}%(asctime)s{RESET} " "{0}%(levelname)-8s" \
        f"{RESET} [%(module)s:%(lineno)d] " "{0}%(message)s" f"{RESET}"

    def __init__(self) -> None:
        super().__init__()
        self.__formatters = {
            logging.DEBUG: logging.Formatter(self.LAYOUT.format(self.GREY)),
            logging.INFO: logging.Formatter(self.LAYOUT.format(self.BLUE)),
            logging.WARNING: logging.Formatter(self.LAYOUT.format(self.YELLOW)),
            logging.ERROR: logging.Formatter(self.LAYOUT.format(self.RED)),
            logging.CRITICAL: logging.Formatter(self.LAYOUT.format(self.BOLD_RED)),
        }

    def format(self, record: logging.LogRecord) -> str:
        formatter = self.__formatters.get(record.levelno, self.__formatters[logging.INFO])
        return formatter.format(record)


class FileFormatter(logging.Formatter):
    def __init__(self) -> None:
        super().__init__("[%(asctime)s %(module)s:%(lineno)d] %(levelname)s -> %(message)s")


class Logger(logging.Logger, metaclass=Singleton):
    """
    Process-wide logger for diagnostics. Rendering output never goes
    through here; it is printed on stdout by the widgets themselves.
    """

    def __init__(self, level: str = "info", to_screen: bool = True,
                 to_file: bool = False, log_dir: str = "Logs") -> None:
        """
        level: debug, info, warn, error, fatal
        log_dir: directory for dated log files when to_file is set
        """
        if level not in LEVELS:
            raise ValueError(f"Unknown log level: {level!r}")
        super().__init__("gui_factory")
        lvl_val = LEVELS[level]
        self.setLevel(lvl_val)

        if to_screen:
            h = logging.StreamHandler(sys.stderr)
            h.setLevel(lvl_val)
            h.setFormatter(ScreenFormatter())
            self.addHandler(h)

        if to_file:
            log_path = Path(log_dir)
            log_path.mkdir(parents=True, exist_ok=True)
            h = logging.FileHandler(log_path / f"log_{datetime.now().strftime('%Y-%m-%d')}.log",
                                    encoding="utf-8")
            h.setLevel(lvl_val)
            h.setFormatter(FileFormatter())
            self.addHandler(h)
