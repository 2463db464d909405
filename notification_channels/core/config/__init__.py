"""Configuration package."""

from .settings import APISettings, LogSettings, Settings, TwilioSettings, settings

__all__ = ["settings", "Settings", "TwilioSettings", "APISettings", "LogSettings"]
