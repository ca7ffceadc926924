"""Page objects for the application under test."""

from .base import BasePage
from .dynamic_loading import DynamicLoadingPage
from .login import LoginPage

__all__ = ["BasePage", "DynamicLoadingPage", "LoginPage"]
