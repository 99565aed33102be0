from .abstract_factory import GUIFactory
from ..product.abstract_product import Button, Checkbox
from ..product.concrete_products_win import WindowsButton, WindowsCheckbox

class WindowsFactory(GUIFactory):
    family = "Windows"

    def create_button(self) -> Button:
        return WindowsButton()

    def create_checkbox(self) -> Checkbox:
        return WindowsCheckbox()
