"""Fixtures standing in for a live browser."""

from unittest.mock import MagicMock

import pytest
from selenium.common.exceptions import NoSuchElementException


@pytest.fixture
def element():
    """A visible, enabled element."""
    element = MagicMock(name="element")
    element.is_displayed.return_value = True
    element.is_enabled.return_value = True
    element.text = "  You logged into a secure area!\n×  "
    return element


@pytest.fixture
def driver(element):
    """A WebDriver stand-in that finds the same element for every locator."""
    driver = MagicMock(name="driver")
    driver.find_element.return_value = element
    driver.find_elements.return_value = [element]
    driver.current_url = "https://example.test/"
    driver.title = "The Internet"
    driver.session_id = "session-1"
    return driver


@pytest.fixture
def missing(element):
    """Build a find_element side effect that fails for the given locator values."""

    def factory(*values):
        def find_element(by, value):
            if value in values:
                raise NoSuchElementException(f"no element {value}")
            return element

        return find_element

    return factory
