"""Base page object wrapping common WebDriver interactions."""

from urllib.parse import urljoin, urlparse

from selenium.common.exceptions import NoSuchElementException
from selenium.webdriver.remote.webdriver import WebDriver
from selenium.webdriver.remote.webelement import WebElement

from src.automation.locators import Locator
from src.automation.waits import wait_for_displayed
from src.core.config import Settings, settings
from src.core.exceptions import ElementWaitError, PageLoadError
from src.monitoring.logger import get_logger

logger = get_logger(__name__)


class BasePage:
    """Thin facade over WebDriver shared by all page objects.

    Subclasses set ``path`` to the page's location relative to the base URL
    and ``ready_locator`` to an element that is displayed once the page is
    usable. ``visit`` checks it and raises ``PageLoadError`` when it is not.
    """

    path: str = "/"
    ready_locator: Locator | None = None
    ready_timeout: float | None = None

    def __init__(self, driver: WebDriver, config: Settings | None = None) -> None:
        self.driver = driver
        self.config = config or settings

    def url_for(self, path: str) -> str:
        """Resolve a path against the base URL. Absolute URLs pass through."""
        if urlparse(path).scheme:
            return path
        return urljoin(self.config.base_url.rstrip("/") + "/", path.lstrip("/"))

    def visit(self, path: str | None = None) -> "BasePage":
        """Navigate to the page and verify it loaded.

        Args:
            path: Path or absolute URL (uses the page's ``path`` if None)

        Returns:
            self
        """
        url = self.url_for(self.path if path is None else path)
        logger.debug(f"Navigating to: {url}")
        self.driver.get(url)
        self.verify_loaded()
        return self

    def verify_loaded(self) -> None:
        """Raise PageLoadError unless the ready locator is displayed."""
        if self.ready_locator is None:
            return
        if not self.is_displayed(self.ready_locator, timeout=self._ready_timeout):
            raise PageLoadError(type(self).__name__, self.driver.current_url)

    @property
    def _ready_timeout(self) -> float:
        return self.ready_timeout if self.ready_timeout is not None else self.config.wait_timeout

    @property
    def title(self) -> str:
        return self.driver.title

    def find(self, locator: Locator) -> WebElement:
        return self.driver.find_element(*locator)

    def find_all(self, locator: Locator) -> list[WebElement]:
        return self.driver.find_elements(*locator)

    def click(self, locator: Locator) -> None:
        self.find(locator).click()

    def type(self, locator: Locator, text: str) -> None:
        element = self.find(locator)
        element.clear()
        element.send_keys(text)

    def submit(self, locator: Locator) -> None:
        self.find(locator).submit()

    def text_of(self, locator: Locator) -> str:
        return self.find(locator).text.strip()

    def is_displayed(self, locator: Locator, timeout: float | None = None) -> bool:
        """Check whether an element is displayed.

        Without a timeout the page is checked once. With a timeout the check
        polls until the element becomes visible or the timeout expires.

        Args:
            locator: Element locator
            timeout: Seconds to wait for the element

        Returns:
            True if the element is displayed, False if it is hidden or missing
        """
        if timeout is not None:
            try:
                wait_for_displayed(self.driver, locator, timeout)
            except ElementWaitError:
                return False
            return True

        try:
            return self.find(locator).is_displayed()
        except NoSuchElementException:
            return False

    def wait_for_is_displayed(self, locator: Locator, timeout: float | None = None) -> WebElement:
        """Wait for an element to be displayed.

        Raises:
            ElementWaitError: If the element is not displayed in time
        """
        return wait_for_displayed(self.driver, locator, timeout)
