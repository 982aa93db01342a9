"""Configuration module for Vault Allocator."""

from .settings import Settings, get_settings

__all__ = ["Settings", "get_settings"]
