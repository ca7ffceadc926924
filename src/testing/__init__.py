"""Testing module - pytest integration for browser-driven tests."""
