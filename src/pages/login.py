"""Login form page object."""

from selenium.webdriver.remote.webdriver import WebDriver

from src.automation.locators import Locator
from src.core.config import Settings
from src.pages.base import BasePage


class LoginPage(BasePage):
    """The form authentication page at ``/login``."""

    path = "/login"

    LOGIN_FORM = Locator.id("login", name="login_form")
    USERNAME_INPUT = Locator.id("username", name="username_input")
    PASSWORD_INPUT = Locator.id("password", name="password_input")
    SUBMIT_BUTTON = Locator.css("button[type='submit']", name="submit_button")
    SUCCESS_MESSAGE = Locator.css(".flash.success", name="success_message")
    FAILURE_MESSAGE = Locator.css(".flash.error", name="failure_message")
    FLASH_MESSAGE = Locator.id("flash", name="flash_message")

    ready_locator = LOGIN_FORM

    # Flash messages render with the next page load
    message_timeout: float = 2.0

    def __init__(self, driver: WebDriver, config: Settings | None = None) -> None:
        super().__init__(driver, config)
        self.visit()

    def with_(self, username: str, password: str) -> None:
        """Submit the form with the given credentials."""
        self.type(self.USERNAME_INPUT, username)
        self.type(self.PASSWORD_INPUT, password)
        self.click(self.SUBMIT_BUTTON)

    def success_message_present(self) -> bool:
        return self.is_displayed(self.SUCCESS_MESSAGE, timeout=self.message_timeout)

    def failure_message_present(self) -> bool:
        return self.is_displayed(self.FAILURE_MESSAGE, timeout=self.message_timeout)

    def flash_text(self) -> str:
        # Flash text ends with the close button glyph
        return self.text_of(self.FLASH_MESSAGE).rstrip("×").strip()
