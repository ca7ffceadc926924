"""Login walkthrough - drives the form authentication page outside pytest.

This example demonstrates:
- Starting a browser session from settings
- Page objects with explicit waits instead of sleeps
- Screenshots of the final page

Usage:
    python -m examples.login_walkthrough.run
"""

import sys
from pathlib import Path

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent.parent))

from src.automation.browser import browser_session
from src.core.config import settings
from src.monitoring.logger import get_logger, setup_logging
from src.pages import LoginPage

logger = get_logger(__name__)

CREDENTIALS = [
    ("tomsmith", "SuperSecretPassword!"),
    ("tomsmith", "not the password"),
]


def main() -> int:
    setup_logging()
    rejected = 0

    with browser_session(settings, test_name="login_walkthrough") as browser:
        for username, password in CREDENTIALS:
            login = LoginPage(browser.driver, settings)
            login.with_(username, password)

            if login.success_message_present():
                logger.info(f"Logged in | user={username}")
            else:
                rejected += 1
                logger.warning(f"Login rejected | user={username} | message={login.flash_text()}")

        browser.take_screenshot(settings.screenshots_dir / "login_walkthrough.png")

    logger.info(f"Walkthrough finished | attempts={len(CREDENTIALS)} | rejected={rejected}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
