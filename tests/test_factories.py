from __future__ import annotations

import pytest

from abstract.factory.abstract_factory import GUIFactory
from abstract.factory.concrete_factory_mac import MacFactory
from abstract.factory.concrete_factory_win import WindowsFactory
from abstract.product.abstract_product import Button, Checkbox
from abstract.product.concrete_products_mac import MacButton, MacCheckbox
from abstract.product.concrete_products_win import WindowsButton, WindowsCheckbox


@pytest.mark.parametrize("factory_cls", [WindowsFactory, MacFactory])
def test_button_and_checkbox_share_family(factory_cls) -> None:
    factory = factory_cls()
    button = factory.create_button()
    checkbox = factory.create_checkbox()
    assert isinstance(button, Button)
    assert isinstance(checkbox, Checkbox)
    assert button.family == checkbox.family == factory.family


def test_windows_factory_builds_windows_widgets() -> None:
    factory = WindowsFactory()
    assert type(factory.create_button()) is WindowsButton
    assert type(factory.create_checkbox()) is WindowsCheckbox


def test_mac_factory_builds_mac_widgets() -> None:
    factory = MacFactory()
    assert type(factory.create_button()) is MacButton
    assert type(factory.create_checkbox()) is MacCheckbox


@pytest.mark.parametrize("factory_cls", [WindowsFactory, MacFactory])
def test_each_call_returns_a_new_instance(factory_cls) -> None:
    factory = factory_cls()
    assert factory.create_button() is not factory.create_button()
    assert factory.create_checkbox() is not factory.create_checkbox()


def test_gui_factory_is_abstract() -> None:
    with pytest.raises(TypeError):
        GUIFactory()
