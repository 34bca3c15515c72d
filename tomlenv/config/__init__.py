"""Configuration - TOMLENV_* settings shared by the library and the CLI."""
from .settings import Settings, settings

__all__ = ["Settings", "settings"]
