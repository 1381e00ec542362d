"""Adapters for the collections the asset browsers manage."""

from .gdrive import GDriveAdapter
from .lightroom import LightroomAdapter

__all__ = ['GDriveAdapter', 'LightroomAdapter']
