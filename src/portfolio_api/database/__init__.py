"""
Database module for the Portfolio API
"""

from .collections import Collection
from .connection import close_client, get_client, get_database, init_client

__all__ = ["Collection", "close_client", "get_client", "get_database", "init_client"]
