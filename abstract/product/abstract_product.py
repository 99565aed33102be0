from abc import ABC, abstractmethod

# --- Abstract Products ---

class Button(ABC):
    kind: str = "button"
    family: str = ""

    @abstractmethod
    def paint(self) -> None: ...


class Checkbox(ABC):
    kind: str = "checkbox"
    family: str = ""

    @abstractmethod
    def paint(self) -> None: ...
