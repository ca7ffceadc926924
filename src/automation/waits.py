"""Explicit waiting strategies."""

from typing import Any, Callable

from selenium.common.exceptions import TimeoutException
from selenium.webdriver.remote.webdriver import WebDriver
from selenium.webdriver.remote.webelement import WebElement
from selenium.webdriver.support import expected_conditions as EC
from selenium.webdriver.support.ui import WebDriverWait

from src.automation.locators import Locator
from src.core.config import settings
from src.core.exceptions import ElementWaitError
from src.monitoring.logger import get_logger

logger = get_logger(__name__)

POLL_FREQUENCY = 0.5


def wait_for(
    driver: WebDriver,
    condition: Callable[[WebDriver], Any],
    timeout: float | None = None,
    message: str = "Condition not met",
    locator: Locator | None = None,
) -> Any:
    """Poll a condition until it returns a truthy value.

    Args:
        driver: Selenium WebDriver instance
        condition: Callable receiving the driver
        timeout: Wait timeout in seconds (uses settings if None)
        message: Error message used on expiry
        locator: Locator the condition refers to, for error reporting

    Returns:
        The condition's first truthy result

    Raises:
        ElementWaitError: If the timeout expires
    """
    timeout = timeout if timeout is not None else settings.wait_timeout
    try:
        return WebDriverWait(driver, timeout, poll_frequency=POLL_FREQUENCY).until(condition)
    except TimeoutException as e:
        logger.debug(f"Wait expired | {message} | timeout={timeout}s")
        raise ElementWaitError(message, timeout=timeout, locator=locator) from e


def wait_for_displayed(
    driver: WebDriver, locator: Locator, timeout: float | None = None
) -> WebElement:
    """Wait until an element is present and visible.

    Raises:
        ElementWaitError: If the element is not displayed in time
    """
    return wait_for(
        driver,
        EC.visibility_of_element_located(locator.as_tuple()),
        timeout,
        message="Element not displayed",
        locator=locator,
    )


def wait_for_clickable(
    driver: WebDriver, locator: Locator, timeout: float | None = None
) -> WebElement:
    """Wait until an element is visible and enabled."""
    return wait_for(
        driver,
        EC.element_to_be_clickable(locator.as_tuple()),
        timeout,
        message="Element not clickable",
        locator=locator,
    )


def wait_for_gone(driver: WebDriver, locator: Locator, timeout: float | None = None) -> bool:
    """Wait until an element is hidden or removed from the page.

    Raises:
        ElementWaitError: If the element is still displayed after the timeout
    """
    wait_for(
        driver,
        EC.invisibility_of_element_located(locator.as_tuple()),
        timeout,
        message="Element still displayed",
        locator=locator,
    )
    return True


def wait_for_page_load(driver: WebDriver, timeout: float | None = None) -> bool:
    """Wait for the document to finish loading.

    Raises:
        ElementWaitError: If the page does not finish loading in time
    """
    wait_for(
        driver,
        lambda d: d.execute_script("return document.readyState") == "complete",
        timeout,
        message="Page load incomplete",
    )
    return True
