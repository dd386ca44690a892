"""
Configuration Module

Application configuration loaded from environment variables.

Usage:
======
    from moviejournal.config.settings import settings

    db_url = settings.database_url
    is_dev = settings.is_development
"""

from moviejournal.config.settings import settings, get_settings, Settings

__all__ = [
    "settings",
    "get_settings",
    "Settings",
]
