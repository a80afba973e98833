"""Data providers for the business group resolver."""

from .base import BaseProvider
from .directory import BusinessGroupDirectory, GroupDirectory

__all__ = ["BaseProvider", "BusinessGroupDirectory", "GroupDirectory"]
