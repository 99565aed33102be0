from .abstract_product import Button, Checkbox

# ──────────────────────────────────────────────────────────────
# Concrete Products - Mac
# ──────────────────────────────────────────────────────────────
class MacButton(Button):
    family = "Mac"

    def paint(self) -> None:
        print("Rendering a button in Mac style.")


class MacCheckbox(Checkbox):
    family = "Mac"

    def paint(self) -> None:
        print("Rendering a checkbox in Mac style.")
