"""Dynamically loaded content page object."""

from src.automation.locators import Locator
from src.pages.base import BasePage


class DynamicLoadingPage(BasePage):
    """Pages at ``/dynamic_loading/<n>`` that reveal text after a delay.

    Example 1 shows an element that was hidden on the page. Example 2 renders
    an element that did not exist before the start button was clicked.
    """

    path = "/dynamic_loading/1"
    examples_path = "/dynamic_loading"

    START_BUTTON = Locator.css("#start button", name="start_button")
    LOADING_INDICATOR = Locator.id("loading", name="loading_indicator")
    FINISH_TEXT = Locator.id("finish", name="finish_text")

    ready_locator = START_BUTTON

    finish_timeout: float = 10.0

    def load_example(self, example: int) -> None:
        """Open an example and start loading its content.

        Args:
            example: Example number (1 or 2)

        Raises:
            ValueError: If the example does not exist
        """
        if example not in (1, 2):
            raise ValueError(f"Unknown dynamic loading example: {example}")
        self.visit(f"{self.examples_path}/{example}")
        self.click(self.START_BUTTON)

    def finish_text_present(self, timeout: float | None = None) -> bool:
        return self.is_displayed(
            self.FINISH_TEXT, timeout=self.finish_timeout if timeout is None else timeout
        )

    def finish_text(self) -> str:
        return self.text_of(self.FINISH_TEXT)
