"""Configuration Package

Purpose: Centralized configuration management for LogHaven

This package contains environment-based settings for internal diagnostics,
the default repository and timestamp formatting.
"""

from .settings import LogHavenSettings, get_settings, reset_settings

__all__ = ["LogHavenSettings", "get_settings", "reset_settings"]
