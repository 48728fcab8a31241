"""Data models for jpikit.

This module exports the configuration structures used throughout the application.
"""

from jpikit.models.extension import (
    PluginDeveloper,
    PluginExtension,
    PluginLicense,
    ProjectConfig,
    VerificationConfig,
    trim_plugin_suffix,
)

__all__ = [
    "PluginDeveloper",
    "PluginExtension",
    "PluginLicense",
    "ProjectConfig",
    "VerificationConfig",
    "trim_plugin_suffix",
]
