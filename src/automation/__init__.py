"""Automation module - Selenium browser management, locators and waits."""

from .browser import BrowserManager, DriverFactory, browser_session, report_sauce_result
from .locators import Locator
from .waits import (
    wait_for,
    wait_for_clickable,
    wait_for_displayed,
    wait_for_gone,
    wait_for_page_load,
)

__all__ = [
    "BrowserManager",
    "DriverFactory",
    "Locator",
    "browser_session",
    "report_sauce_result",
    "wait_for",
    "wait_for_clickable",
    "wait_for_displayed",
    "wait_for_gone",
    "wait_for_page_load",
]
