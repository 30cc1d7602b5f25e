"""
Core configuration and constants.
"""

from aggregate_paginator.core.config import Settings, settings

__all__ = ["Settings", "settings"]
