"""Root pytest configuration."""

pytest_plugins = ["pytester", "src.testing.plugin"]
