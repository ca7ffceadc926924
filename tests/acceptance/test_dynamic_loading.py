"""Explicit waits against dynamically loaded content."""

import pytest

from src.pages import DynamicLoadingPage

pytestmark = [pytest.mark.acceptance, pytest.mark.deep]


@pytest.fixture
def dynamic_loading(driver, config):
    """Dynamic loading page bound to a fresh browser."""
    return DynamicLoadingPage(driver, config)


def test_hidden_element(dynamic_loading):
    """Test waiting for an element that was hidden."""
    dynamic_loading.load_example(1)

    assert dynamic_loading.finish_text_present()
    assert dynamic_loading.finish_text() == "Hello World!"


def test_rendered_element(dynamic_loading):
    """Test waiting for an element rendered after loading."""
    dynamic_loading.load_example(2)

    assert dynamic_loading.finish_text_present()
    assert dynamic_loading.finish_text() == "Hello World!"
