"""
Configuration loading for the workday helper.
"""

from workday_helper.config.manager import ConfigManager

__all__ = ["ConfigManager"]
