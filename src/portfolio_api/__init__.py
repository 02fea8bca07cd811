"""
Portfolio API
Read-only GraphQL API for personal portfolio content stored in MongoDB
"""

__version__ = "0.1.0"

__all__ = ["__version__"]
