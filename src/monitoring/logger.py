"""Centralized logging configuration using Loguru."""

import sys
from typing import Any

from loguru import logger

from src.core.config import settings


def setup_logging() -> None:
    """Configure Loguru logging for test runs."""
    # Remove default handler
    logger.remove()

    console_format = (
        "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | "
        "<level>{level: <8}</level> | "
        "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> | "
        "<level>{message}</level>"
    )

    file_format = (
        "{time:YYYY-MM-DD HH:mm:ss.SSS} | "
        "{level: <8} | "
        "{name}:{function}:{line} | "
        "{message} | "
        "{extra}"
    )

    logger.add(
        sys.stderr,
        format=console_format,
        level=settings.log_level,
        colorize=True,
        backtrace=True,
        diagnose=settings.debug,
    )

    logger.add(
        settings.logs_dir / "selenium_guide_{time:YYYY-MM-DD}.log",
        format=file_format,
        level="DEBUG",
        rotation="00:00",
        retention="14 days",
        compression="gz",
        backtrace=True,
        diagnose=True,
    )

    logger.info(
        f"Logging initialized | level={settings.log_level} | host={settings.selenium_host.value}"
    )


def get_logger(name: str) -> Any:
    """Get a logger instance with the given name.

    Args:
        name: Logger name (usually __name__)

    Returns:
        Configured logger instance
    """
    return logger.bind(name=name)


def log_test_start(nodeid: str, markers: list[str] | None = None, **extra: Any) -> None:
    """Log test start event.

    Args:
        nodeid: Pytest node id
        markers: Marker names applied to the test
        **extra: Additional context
    """
    tags = ",".join(markers or []) or "-"
    logger.bind(nodeid=nodeid, markers=tags, **extra).info(
        f"Test started | id={nodeid} | markers={tags}"
    )


def log_test_result(nodeid: str, outcome: str, duration: float, **extra: Any) -> None:
    """Log test result event.

    Args:
        nodeid: Pytest node id
        outcome: passed, failed or skipped
        duration: Test call duration in seconds
        **extra: Additional context
    """
    bound = logger.bind(nodeid=nodeid, outcome=outcome, duration=duration, **extra)
    log_func = bound.error if outcome == "failed" else bound.info

    log_func(f"Test finished | id={nodeid} | outcome={outcome} | duration={duration:.2f}s")
