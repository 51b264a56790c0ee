"""Registry of named, pluggable implementations."""
from __future__ import annotations

from labscan.plugins.registry import (
    PluginAlreadyRegisteredError,
    PluginNotFoundError,
    PluginRegistry,
)

__all__ = ["PluginRegistry", "PluginNotFoundError", "PluginAlreadyRegisteredError"]
