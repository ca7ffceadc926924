"""Framework exceptions."""


class FrameworkError(Exception):
    """Base exception for framework failures."""


class DriverSetupError(FrameworkError):
    """Browser session could not be created."""


class PageLoadError(FrameworkError):
    """Page object did not reach its ready state after navigation."""

    def __init__(self, page: str, url: str) -> None:
        self.page = page
        self.url = url
        super().__init__(f"{page} not loaded | url={url}")


class ElementWaitError(FrameworkError):
    """Explicit wait expired before its condition was met."""

    def __init__(self, message: str, timeout: float, locator: object | None = None) -> None:
        self.timeout = timeout
        self.locator = locator
        detail = f" | locator={locator}" if locator is not None else ""
        super().__init__(f"{message} | timeout={timeout}s{detail}")
