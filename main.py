from __future__ import annotations
from pathlib import Path
import sys
from abstract.factory.abstract_factory import GUIFactory
from abstract.factory.concrete_factory_win import WindowsFactory
from abstract.factory.concrete_factory_mac import MacFactory
from abstract.product.abstract_product import Button, Checkbox
from utils.config import AppConfig
from utils.logger import Logger

CONFIG_PATH = Path(__file__).resolve().parent / "config.yaml"


class Application:
    def __init__(self, factory: "GUIFactory") -> None:
        # Both widgets come from the same factory, so they share a family
        self.__button: Button = factory.create_button()
        self.__checkbox: Checkbox = factory.create_checkbox()
        Logger().debug("Application built with %s widgets", factory.family)

    def paint(self) -> None:
        self.__button.paint()
        self.__checkbox.paint()


def choose_factory(os_type: str) -> "GUIFactory":
    if os_type == "Windows":
        return WindowsFactory()
    if os_type != "Mac":
        Logger().warning("Unrecognized os_type %r, falling back to Mac", os_type)
    return MacFactory()


def main(config_path: Path = CONFIG_PATH) -> int:
    config = AppConfig(config_path)
    Logger(level=config.log_level(), to_file=config.log_to_file(), log_dir=config.log_dir())
    if not config.exists():
        Logger().debug("No config at %s, using os_type=%s", config.path(), config.os_type())

    app = Application(choose_factory(config.os_type()))
    app.paint()
    return 0


def run(config_path: Path = CONFIG_PATH) -> int:
    """Process entry: 0 after painting, 1 once a fatal error is logged."""
    try:
        return main(config_path)
    except Exception as e:
        Logger().critical("Fatal error: %s", e, exc_info=True)
        return 1


if __name__ == "__main__":
    sys.exit(run())
