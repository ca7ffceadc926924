"""Locator definitions: strategy/value pairs for finding elements."""

from dataclasses import dataclass
from typing import Any, Iterator

from selenium.webdriver.common.by import By

STRATEGIES = {
    "css": By.CSS_SELECTOR,
    "xpath": By.XPATH,
    "id": By.ID,
    "class": By.CLASS_NAME,
    "name": By.NAME,
    "tag": By.TAG_NAME,
    "link_text": By.LINK_TEXT,
    "partial_link_text": By.PARTIAL_LINK_TEXT,
}


@dataclass(frozen=True)
class Locator:
    """A strategy/value pair identifying an element on a page."""

    by: str
    value: str
    name: str = ""

    def as_tuple(self) -> tuple[str, str]:
        """Get (by, value) tuple for Selenium calls.

        Returns:
            Locator tuple
        """
        return (self.by, self.value)

    def __iter__(self) -> Iterator[str]:
        return iter(self.as_tuple())

    def __str__(self) -> str:
        label = f"{self.name} " if self.name else ""
        return f"{label}({self.by}={self.value})"

    @classmethod
    def id(cls, element_id: str, name: str = "") -> "Locator":
        return cls(By.ID, element_id, name)

    @classmethod
    def css(cls, selector: str, name: str = "") -> "Locator":
        return cls(By.CSS_SELECTOR, selector, name)

    @classmethod
    def xpath(cls, selector: str, name: str = "") -> "Locator":
        return cls(By.XPATH, selector, name)

    @classmethod
    def by_name(cls, element_name: str, name: str = "") -> "Locator":
        return cls(By.NAME, element_name, name)

    @classmethod
    def class_name(cls, class_name: str, name: str = "") -> "Locator":
        return cls(By.CLASS_NAME, class_name, name)

    @classmethod
    def tag(cls, tag_name: str, name: str = "") -> "Locator":
        return cls(By.TAG_NAME, tag_name, name)

    @classmethod
    def link_text(cls, text: str, name: str = "") -> "Locator":
        return cls(By.LINK_TEXT, text, name)

    @classmethod
    def parse(cls, text: str, name: str = "") -> "Locator":
        """Create locator from a ``strategy=value`` string.

        A string without a known strategy prefix is taken as a CSS selector,
        so ``"#username"`` and ``"css=#username"`` are equivalent.

        Args:
            text: Locator string, e.g. ``"id=username"``
            name: Optional locator name

        Returns:
            Locator instance

        Raises:
            ValueError: If the string is empty or names an unknown strategy
        """
        text = text.strip()
        if not text:
            raise ValueError("Empty locator")

        strategy, sep, value = text.partition("=")
        if sep and strategy.isidentifier():
            by = STRATEGIES.get(strategy.lower())
            if by is None:
                raise ValueError(f"Unknown locator strategy: {strategy}")
            if not value:
                raise ValueError(f"Empty locator value for strategy: {strategy}")
            return cls(by, value, name)

        return cls(By.CSS_SELECTOR, text, name)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Locator":
        """Create locator from dictionary.

        Args:
            data: Dictionary with ``selector`` and optional ``type`` and ``name``

        Returns:
            Locator instance

        Raises:
            ValueError: If ``type`` names an unknown strategy
        """
        strategy = data.get("type", "css")
        by = STRATEGIES.get(strategy)
        if by is None:
            raise ValueError(f"Unknown locator strategy: {strategy}")
        return cls(by, data["selector"], data.get("name", ""))
