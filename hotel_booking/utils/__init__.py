"""
Utility package initialization and exports
"""

from .date_utils import UTC, now_utc

__all__ = ["UTC", "now_utc"]
