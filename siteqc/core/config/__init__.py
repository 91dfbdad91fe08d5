# (c) Copyright Datacraft, 2026
"""Configuration module for siteqc."""
from .settings import Settings, get_settings

__all__ = [
	'Settings',
	'get_settings',
]
