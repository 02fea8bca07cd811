"""
Generic fetch pipeline: owner-scoped find, cursor drain and document conversion
"""

from collections.abc import Mapping
from datetime import datetime
from typing import Any, TypeVar

import bson
from bson import Decimal128, Int64, ObjectId
from bson.codec_options import CodecOptions
from bson.errors import BSONError
from bson.raw_bson import RawBSONDocument
from pymongo.asynchronous.database import AsyncDatabase
from pymongo.errors import ConfigurationError, ConnectionFailure, PyMongoError

from ..config import get_owner_email
from ..documents import PortfolioDocument, convert
from ..errors import ConversionError, QueryError, StoreConnectionError
from ..logging import get_logger
from .collections import Collection, resolve_collection

logger = get_logger(__name__)

DocumentT = TypeVar("DocumentT", bound=PortfolioDocument)

OWNER_FIELD = "email"

# Cursors hand back undecoded documents so a bad one can be skipped on its own
RAW_CODEC_OPTIONS = CodecOptions(document_class=RawBSONDocument)
DECODE_CODEC_OPTIONS = CodecOptions(tz_aware=True)


def build_owner_filter(extra_filters: Mapping[str, Any] | None = None) -> dict[str, Any]:
    """Build the equality filter scoping a query to the configured owner.

    The owner email is applied last, so an extra filter naming the owner
    field cannot widen the query to another owner.
    """
    query: dict[str, Any] = dict(extra_filters or {})
    query[OWNER_FIELD] = get_owner_email()
    return query


def normalize_value(value: Any) -> Any:
    """Convert BSON values into plain JSON-compatible Python values."""
    if isinstance(value, Mapping):
        return {str(key): normalize_value(item) for key, item in value.items()}
    if isinstance(value, list | tuple):
        return [normalize_value(item) for item in value]
    if isinstance(value, ObjectId):
        return str(value)
    if isinstance(value, datetime):
        return value.isoformat()
    if isinstance(value, Int64):
        return int(value)
    if isinstance(value, Decimal128):
        return str(value)
    return value


def decode_document(raw: Any) -> dict[str, Any]:
    """Decode one cursor item into a normalized dict.

    Raises:
        BSONError: If the raw bytes are not a valid BSON document
    """
    if isinstance(raw, RawBSONDocument):
        raw = bson.decode(raw.raw, codec_options=DECODE_CODEC_OPTIONS)
    return normalize_value(raw)


async def fetch_documents(
    database: AsyncDatabase,
    collection: Collection | str,
    extra_filters: Mapping[str, Any] | None = None,
) -> list[dict[str, Any]]:
    """Fetch every owner-scoped document in ``collection``.

    Runs a find with no sort, limit or projection and drains the cursor.
    Documents that cannot be decoded are logged and skipped.

    Raises:
        StoreConnectionError: If the database cannot be reached
        QueryError: If the collection is unknown or the find fails
    """
    name = resolve_collection(collection).value
    query = build_owner_filter(extra_filters)

    documents: list[dict[str, Any]] = []
    try:
        mongo_collection = database.get_collection(name, codec_options=RAW_CODEC_OPTIONS)
        async for raw in mongo_collection.find(query):
            try:
                documents.append(decode_document(raw))
            except BSONError as e:
                logger.warning("Error deserializing document", collection=name, error=str(e))
    except (ConnectionFailure, ConfigurationError) as e:
        logger.error("Error connecting to MongoDB", collection=name, error=str(e))
        raise StoreConnectionError(str(e)) from e
    except PyMongoError as e:
        logger.error("Find failed", collection=name, error=str(e))
        raise QueryError(str(e)) from e

    logger.debug("Fetched documents", collection=name, count=len(documents))
    return documents


def convert_documents(
    documents: list[dict[str, Any]], model: type[DocumentT], collection: Collection | str
) -> list[DocumentT]:
    """Convert documents into ``model``, dropping the ones that do not fit."""
    name = resolve_collection(collection).value
    converted: list[DocumentT] = []
    for raw in documents:
        try:
            converted.append(convert(raw, model))
        except ConversionError as e:
            logger.warning(
                "Dropping document that does not match its type",
                collection=name,
                model=e.model_name,
                document_id=e.document_id,
                error=e.detail,
            )
    dropped = len(documents) - len(converted)
    if dropped:
        logger.info(
            "Dropped documents during conversion",
            collection=name,
            fetched=len(documents),
            dropped=dropped,
        )
    return converted


async def fetch_all(
    database: AsyncDatabase,
    collection: Collection | str,
    model: type[DocumentT],
    extra_filters: Mapping[str, Any] | None = None,
) -> list[DocumentT]:
    """Fetch and convert every owner-scoped document in ``collection``."""
    documents = await fetch_documents(database, collection, extra_filters)
    return convert_documents(documents, model, collection)


async def fetch_first(
    database: AsyncDatabase,
    collection: Collection | str,
    model: type[DocumentT],
    extra_filters: Mapping[str, Any] | None = None,
) -> DocumentT | None:
    """Fetch the first matching document, or None if nothing matches or it does not convert."""
    documents = await fetch_documents(database, collection, extra_filters)
    if not documents:
        return None
    converted = convert_documents(documents[:1], model, collection)
    return converted[0] if converted else None
