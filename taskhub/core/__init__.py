"""Core module for the taskhub application."""

from taskhub.core.config import Settings, EnvironmentType
from taskhub.core.logging import setup_logging

__all__ = ["Settings", "EnvironmentType", "setup_logging"]
