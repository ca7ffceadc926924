"""Centralized configuration management using Pydantic Settings."""

from enum import Enum
from functools import lru_cache
from pathlib import Path
from typing import Literal

from pydantic import Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class BrowserType(str, Enum):
    """Supported browser types."""

    CHROME = "chrome"
    FIREFOX = "firefox"
    EDGE = "edge"


class HostType(str, Enum):
    """Where browser sessions are started."""

    LOCALHOST = "localhost"
    GRID = "grid"
    SAUCELABS = "saucelabs"


class Settings(BaseSettings):
    """Test run settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Application
    app_name: str = Field(default="SeleniumGuide", description="Application name")
    debug: bool = Field(default=False, description="Debug mode")
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="INFO", description="Logging level"
    )

    # Application under test
    base_url: str = Field(
        default="https://the-internet.herokuapp.com",
        description="Base URL of the application under test",
    )

    # Browser
    browser_type: BrowserType = Field(default=BrowserType.CHROME, description="Browser type")
    browser_version: str = Field(default="latest", description="Browser version (remote only)")
    platform_name: str = Field(default="Windows 10", description="Operating system (remote only)")
    selenium_headless: bool = Field(default=True, description="Run browser in headless mode")

    # Host
    selenium_host: HostType = Field(default=HostType.LOCALHOST, description="Session host")
    grid_url: str = Field(
        default="http://localhost:4444/wd/hub", description="Selenium Grid hub URL"
    )
    sauce_username: str | None = Field(default=None, description="Sauce Labs username")
    sauce_access_key: str | None = Field(default=None, description="Sauce Labs access key")
    sauce_region: str = Field(default="us-west-1", description="Sauce Labs data center")

    # Timeouts
    selenium_timeout: int = Field(default=30, ge=1, description="Page load timeout in seconds")
    selenium_implicit_wait: int = Field(default=0, ge=0, description="Implicit wait in seconds")
    wait_timeout: float = Field(
        default=15.0, gt=0, description="Default explicit wait timeout in seconds"
    )

    # Artifacts
    screenshots_path: str = Field(default="./screenshots", description="Screenshot directory")
    logs_path: str = Field(default="./logs", description="Log directory")

    @model_validator(mode="after")
    def validate_sauce_credentials(self) -> "Settings":
        """Require credentials when sessions run on Sauce Labs."""
        if self.selenium_host == HostType.SAUCELABS:
            if not self.sauce_username or not self.sauce_access_key:
                raise ValueError(
                    "sauce_username and sauce_access_key are required when selenium_host=saucelabs"
                )
        return self

    @property
    def is_remote(self) -> bool:
        """Check if sessions run on a remote end."""
        return self.selenium_host != HostType.LOCALHOST

    @property
    def sauce_url(self) -> str:
        """Get Sauce Labs WebDriver endpoint."""
        return f"https://ondemand.{self.sauce_region}.saucelabs.com:443/wd/hub"

    @property
    def screenshots_dir(self) -> Path:
        """Get screenshot directory path."""
        path = Path(self.screenshots_path)
        path.mkdir(parents=True, exist_ok=True)
        return path

    @property
    def logs_dir(self) -> Path:
        """Get logs directory path."""
        path = Path(self.logs_path)
        path.mkdir(parents=True, exist_ok=True)
        return path


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()


# Global settings instance
settings = get_settings()
