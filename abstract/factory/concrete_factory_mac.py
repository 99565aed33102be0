from .abstract_factory import GUIFactory
from ..product.abstract_product import Button, Checkbox
from ..product.concrete_products_mac import MacButton, MacCheckbox

class MacFactory(GUIFactory):
    family = "Mac"

    def create_button(self) -> Button:
        return MacButton()

    def create_checkbox(self) -> Checkbox:
        return MacCheckbox()
