"""
Error types raised while reading portfolio content
"""

from __future__ import annotations

from typing import Any


class PortfolioAPIError(Exception):
    """Base class for all Portfolio API errors."""


class StoreConnectionError(PortfolioAPIError, ConnectionError):
    """The document store cannot be reached or the connection string is invalid."""


class QueryError(PortfolioAPIError):
    """The find operation failed, or the collection name is not a known collection."""


class ConversionError(PortfolioAPIError):
    """A single document does not match the shape it is being converted into."""

    def __init__(self, model_name: str, detail: str, document_id: Any = None) -> None:
        self.model_name = model_name
        self.detail = detail
        self.document_id = document_id
        super().__init__(f"Cannot convert document into {model_name}: {detail}")
