from .abstract_product import Button, Checkbox

# ──────────────────────────────────────────────────────────────
# Concrete Products - Windows
# ──────────────────────────────────────────────────────────────
class WindowsButton(Button):
    family = "Windows"

    def paint(self) -> None:
        print("Rendering a button in Windows style.")


class WindowsCheckbox(Checkbox):
    family = "Windows"

    def paint(self) -> None:
        print("Rendering a checkbox in Windows style.")
