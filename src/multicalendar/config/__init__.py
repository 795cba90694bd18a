"""Configuration module for the multi-calendar service."""

from multicalendar.config.base import Settings
from multicalendar.config.loader import get_settings

__all__ = ["Settings", "get_settings"]
