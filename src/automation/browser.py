"""Selenium browser factory and management."""

from contextlib import contextmanager
from pathlib import Path
from typing import Any, Generator

from selenium import webdriver
from selenium.common.exceptions import WebDriverException
from selenium.webdriver.chrome.options import Options as ChromeOptions
from selenium.webdriver.chrome.service import Service as ChromeService
from selenium.webdriver.edge.options import Options as EdgeOptions
from selenium.webdriver.edge.service import Service as EdgeService
from selenium.webdriver.firefox.options import Options as FirefoxOptions
from selenium.webdriver.firefox.service import Service as FirefoxService
from selenium.webdriver.remote.webdriver import WebDriver
from webdriver_manager.chrome import ChromeDriverManager
from webdriver_manager.firefox import GeckoDriverManager
from webdriver_manager.microsoft import EdgeChromiumDriverManager

from src.core.config import BrowserType, HostType, Settings, settings
from src.core.exceptions import DriverSetupError
from src.monitoring.logger import get_logger

logger = get_logger(__name__)

BrowserOptions = ChromeOptions | FirefoxOptions | EdgeOptions


class DriverFactory:
    """Factory for creating local and remote WebDriver sessions."""

    @staticmethod
    def _get_chrome_options(headless: bool = True) -> ChromeOptions:
        """Configure Chrome options.

        Args:
            headless: Run in headless mode

        Returns:
            Configured ChromeOptions
        """
        options = ChromeOptions()

        if headless:
            options.add_argument("--headless=new")

        options.add_argument("--no-sandbox")
        options.add_argument("--disable-dev-shm-usage")
        options.add_argument("--disable-gpu")
        options.add_argument("--disable-notifications")
        options.add_argument("--window-size=1920,1080")
        options.add_experimental_option(
            "prefs",
            {
                "credentials_enable_service": False,
                "profile.password_manager_enabled": False,
            },
        )

        return options

    @staticmethod
    def _get_firefox_options(headless: bool = True) -> FirefoxOptions:
        """Configure Firefox options.

        Args:
            headless: Run in headless mode

        Returns:
            Configured FirefoxOptions
        """
        options = FirefoxOptions()

        if headless:
            options.add_argument("--headless")

        options.add_argument("--width=1920")
        options.add_argument("--height=1080")
        options.set_preference("dom.webnotifications.enabled", False)

        return options

    @staticmethod
    def _get_edge_options(headless: bool = True) -> EdgeOptions:
        """Configure Edge options.

        Args:
            headless: Run in headless mode

        Returns:
            Configured EdgeOptions
        """
        options = EdgeOptions()

        if headless:
            options.add_argument("--headless=new")

        options.add_argument("--no-sandbox")
        options.add_argument("--disable-dev-shm-usage")
        options.add_argument("--window-size=1920,1080")

        return options

    @classmethod
    def get_options(cls, browser_type: BrowserType, headless: bool = True) -> BrowserOptions:
        """Build options for a browser type.

        Args:
            browser_type: Type of browser
            headless: Run in headless mode

        Returns:
            Browser options

        Raises:
            DriverSetupError: If the browser type is not supported
        """
        if browser_type == BrowserType.CHROME:
            return cls._get_chrome_options(headless)
        if browser_type == BrowserType.FIREFOX:
            return cls._get_firefox_options(headless)
        if browser_type == BrowserType.EDGE:
            return cls._get_edge_options(headless)
        raise DriverSetupError(f"Unsupported browser type: {browser_type}")

    @classmethod
    def _create_local(cls, config: Settings) -> WebDriver:
        """Start a browser on this machine."""
        options = cls.get_options(config.browser_type, config.selenium_headless)

        if config.browser_type == BrowserType.CHROME:
            service = ChromeService(ChromeDriverManager().install())
            return webdriver.Chrome(service=service, options=options)

        if config.browser_type == BrowserType.FIREFOX:
            service = FirefoxService(GeckoDriverManager().install())
            return webdriver.Firefox(service=service, options=options)

        service = EdgeService(EdgeChromiumDriverManager().install())
        return webdriver.Edge(service=service, options=options)

    @classmethod
    def _create_remote(cls, config: Settings, test_name: str | None = None) -> WebDriver:
        """Start a browser on Selenium Grid or Sauce Labs."""
        options = cls.get_options(config.browser_type, headless=False)
        options.browser_version = config.browser_version
        options.platform_name = config.platform_name

        if config.selenium_host == HostType.SAUCELABS:
            sauce_options: dict[str, Any] = {
                "username": config.sauce_username,
                "accessKey": config.sauce_access_key,
            }
            if test_name:
                sauce_options["name"] = test_name
            options.set_capability("sauce:options", sauce_options)
            command_executor = config.sauce_url
        else:
            command_executor = config.grid_url

        return webdriver.Remote(command_executor=command_executor, options=options)

    @classmethod
    def create(cls, config: Settings | None = None, test_name: str | None = None) -> WebDriver:
        """Create a new WebDriver session.

        Args:
            config: Run settings (uses global settings if None)
            test_name: Test name reported to the remote end

        Returns:
            Configured WebDriver instance

        Raises:
            DriverSetupError: If the session cannot be created
        """
        config = config or settings
        headless = config.selenium_headless and not config.is_remote

        logger.info(
            f"Creating browser | type={config.browser_type.value} | "
            f"host={config.selenium_host.value} | headless={headless}"
        )

        try:
            if config.is_remote:
                driver = cls._create_remote(config, test_name)
            else:
                driver = cls._create_local(config)
        except WebDriverException as e:
            raise DriverSetupError(f"Could not start {config.browser_type.value}: {e.msg}") from e

        try:
            driver.set_page_load_timeout(config.selenium_timeout)
            driver.implicitly_wait(config.selenium_implicit_wait)
        except Exception:
            driver.quit()
            raise

        logger.info(f"Browser created successfully | session_id={driver.session_id}")
        return driver


def report_sauce_result(driver: WebDriver, passed: bool) -> None:
    """Mark the Sauce Labs job as passed or failed.

    Args:
        driver: Remote WebDriver bound to a Sauce Labs session
        passed: Test outcome
    """
    result = "passed" if passed else "failed"
    driver.execute_script(f"sauce:job-result={result}")
    logger.info(f"Sauce job updated | session_id={driver.session_id} | result={result}")


class BrowserManager:
    """Manager for browser lifecycle and operations."""

    def __init__(self, config: Settings | None = None, test_name: str | None = None) -> None:
        """Initialize browser manager.

        Args:
            config: Run settings
            test_name: Test name reported to the remote end
        """
        self.config = config or settings
        self.test_name = test_name
        self._driver: WebDriver | None = None

    @property
    def driver(self) -> WebDriver:
        """Get the active WebDriver instance.

        Returns:
            WebDriver instance

        Raises:
            RuntimeError: If browser not initialized
        """
        if self._driver is None:
            raise RuntimeError("Browser not initialized. Call start() first.")
        return self._driver

    @property
    def is_active(self) -> bool:
        """Check if browser is active."""
        return self._driver is not None

    def start(self) -> WebDriver:
        """Start browser session.

        Returns:
            WebDriver instance
        """
        if self._driver is not None:
            logger.warning("Browser already started, returning existing instance")
            return self._driver

        self._driver = DriverFactory.create(self.config, self.test_name)
        return self._driver

    def stop(self) -> None:
        """Stop browser session."""
        if self._driver is not None:
            try:
                session_id = self._driver.session_id
                self._driver.quit()
                logger.info(f"Browser closed | session_id={session_id}")
            except Exception as e:
                logger.error(f"Error closing browser: {e}")
            finally:
                self._driver = None

    def report_result(self, passed: bool) -> None:
        """Report the test outcome to Sauce Labs sessions.

        Args:
            passed: Test outcome
        """
        if self._driver is None or self.config.selenium_host != HostType.SAUCELABS:
            return
        try:
            report_sauce_result(self._driver, passed)
        except Exception as e:
            logger.warning(f"Could not report Sauce job result: {e}")

    def take_screenshot(self, filepath: str | Path) -> bool:
        """Take screenshot of current page.

        Args:
            filepath: Path to save screenshot

        Returns:
            True if successful
        """
        try:
            saved = self.driver.save_screenshot(str(filepath))
        except WebDriverException as e:
            logger.error(f"Failed to take screenshot: {e}")
            return False
        if saved:
            logger.info(f"Screenshot saved: {filepath}")
        return bool(saved)

    def __enter__(self) -> "BrowserManager":
        """Context manager entry."""
        self.start()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        """Context manager exit."""
        self.stop()


@contextmanager
def browser_session(
    config: Settings | None = None,
    test_name: str | None = None,
) -> Generator[BrowserManager, None, None]:
    """Context manager for browser sessions.

    Args:
        config: Run settings
        test_name: Test name reported to the remote end

    Yields:
        BrowserManager instance
    """
    manager = BrowserManager(config, test_name)
    try:
        manager.start()
        yield manager
    finally:
        manager.stop()
