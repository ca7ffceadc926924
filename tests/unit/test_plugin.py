"""Tests for the pytest plugin."""

from unittest.mock import MagicMock, call, patch

import pytest

from src.automation.browser import DriverFactory
from src.core.config import BrowserType, HostType
from src.testing.plugin import screenshot_name, settings_from_options

SUITE = """
def test_fails(driver):
    assert False

def test_passes(driver):
    pass
"""


def options(**values):
    """Build a getoption stand-in returning None for unset options."""
    defaults = {
        "baseurl": None,
        "browser": None,
        "browser_version": None,
        "platform": None,
        "host": None,
        "headed": False,
    }
    defaults.update(values)
    return defaults.__getitem__


@pytest.fixture
def session_driver():
    """Patch session creation to hand out a stand-in driver."""
    driver = MagicMock(name="driver")
    driver.session_id = "session-1"
    driver.save_screenshot.return_value = True
    with patch.object(DriverFactory, "create", return_value=driver):
        yield driver


@pytest.fixture
def run_suite(pytester, monkeypatch, session_driver):
    """Run a suite with one failing and one passing browser test."""
    monkeypatch.setenv("SCREENSHOTS_PATH", str(pytester.path / "screenshots"))
    monkeypatch.setenv("LOGS_PATH", str(pytester.path / "logs"))
    pytester.makepyfile(test_suite=SUITE)

    def run(*args):
        return pytester.runpytest_inprocess("-p", "src.testing.plugin", *args)

    return run


class TestSettingsFromOptions:
    """Tests for settings_from_options."""

    def test_no_options_uses_environment(self, monkeypatch):
        """Test environment values apply when no options are given."""
        monkeypatch.setenv("BASE_URL", "https://staging.example.test")

        config = settings_from_options(options())

        assert config.base_url == "https://staging.example.test"

    def test_options_override_environment(self, monkeypatch):
        """Test command-line options take precedence over the environment."""
        monkeypatch.setenv("BROWSER_TYPE", "chrome")

        config = settings_from_options(
            options(baseurl="http://localhost:5000", browser="firefox", host="grid")
        )

        assert config.base_url == "http://localhost:5000"
        assert config.browser_type == BrowserType.FIREFOX
        assert config.selenium_host == HostType.GRID

    def test_headed(self):
        """Test --headed disables headless mode."""
        assert settings_from_options(options(headed=True)).selenium_headless is False

    def test_remote_platform(self):
        """Test remote browser version and platform options."""
        config = settings_from_options(options(browser_version="119", platform="macOS 13"))

        assert config.browser_version == "119"
        assert config.platform_name == "macOS 13"


class TestScreenshotName:
    """Tests for screenshot_name."""

    def test_nodeid(self):
        """Test node ids become safe file names."""
        name = screenshot_name("tests/acceptance/test_login.py::test_succeeded[chrome]")

        assert name == "tests_acceptance_test_login.py_test_succeeded_chrome.png"


class TestBrowserFixture:
    """Tests for the browser fixture teardown."""

    def test_screenshot_only_on_failure(self, run_suite, session_driver, pytester):
        """Test a failing test saves one screenshot and a passing test none."""
        result = run_suite()

        result.assert_outcomes(passed=1, failed=1)
        session_driver.save_screenshot.assert_called_once_with(
            str(pytester.path / "screenshots" / "test_suite.py_test_fails.png")
        )
        assert session_driver.quit.call_count == 2

    def test_local_session_reports_nothing(self, run_suite, session_driver):
        """Test local sessions do not send job results."""
        run_suite("--host", "localhost")

        session_driver.execute_script.assert_not_called()

    def test_saucelabs_job_results(self, run_suite, session_driver, monkeypatch):
        """Test Sauce Labs sessions report failed and passed jobs."""
        monkeypatch.setenv("SAUCE_USERNAME", "user")
        monkeypatch.setenv("SAUCE_ACCESS_KEY", "key")

        result = run_suite("--host", "saucelabs")

        result.assert_outcomes(passed=1, failed=1)
        assert session_driver.execute_script.call_args_list == [
            call("sauce:job-result=failed"),
            call("sauce:job-result=passed"),
        ]
