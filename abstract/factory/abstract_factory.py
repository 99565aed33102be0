from abc import ABC, abstractmethod
from ..product.abstract_product import Button, Checkbox
# ──────────────────────────────────────────────────────────────
# Abstract Factory
# ──────────────────────────────────────────────────────────────

class GUIFactory(ABC):
    family: str = ""

    @abstractmethod
    def create_button(self) -> Button: ...

    @abstractmethod
    def create_checkbox(self) -> Checkbox: ...
