"""Core: config, exception handlers, limiter, and application bootstrap.

Single place for settings and shared constants.
"""

from shop_admin.core.config import Settings, get_settings

__all__ = ["Settings", "get_settings"]
