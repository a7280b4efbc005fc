"""
Configuration Module

Environment-driven settings for statusbot.
"""

from statusbot.config.settings import Settings, get_settings

__all__ = ["Settings", "get_settings"]
