"""Shared utilities: logging, settings, base models."""

from trustguard_utils.base import StrictModel
from trustguard_utils.logging import get_logger
from trustguard_utils.settings import Settings, get_settings

__all__ = ["Settings", "StrictModel", "get_logger", "get_settings"]
