"""
MongoDB client management
"""

import os
import threading

from pymongo import AsyncMongoClient
from pymongo.asynchronous.database import AsyncDatabase
from pymongo.errors import ConfigurationError, PyMongoError

from ..config import settings
from ..errors import StoreConnectionError
from ..logging import get_logger

logger = get_logger(__name__)

# Process-wide client; the driver pools connections and is safe for concurrent readers
_client: AsyncMongoClient | None = None
_init_lock = threading.Lock()


def get_mongo_uri() -> str:
    """Get the MongoDB connection string, checking the environment first for test compatibility."""
    for name in ("PORTFOLIO_MONGO_DB_URI", "MONGO_DB_URI"):
        uri = os.getenv(name)
        if uri:
            return uri
    return settings.mongo_db_uri


def reset_client() -> None:
    """Forget the shared client without closing it (for tests)."""
    global _client
    _client = None


def init_client(mongo_uri: str | None = None) -> AsyncMongoClient:
    """Create the shared MongoDB client.

    Thread-safe initialization: at most one client is created when several
    callers race on first use. Passing a URI while a client exists is
    rejected, since the old pool can only be closed from async code.

    Raises:
        StoreConnectionError: If the connection string is invalid
        RuntimeError: If a URI is passed while a client exists
    """
    global _client

    # Fast path: already initialized, no lock needed
    if _client is not None and mongo_uri is None:
        return _client

    with _init_lock:
        # Double-check after acquiring lock (another thread may have initialized)
        if _client is not None:
            if mongo_uri is None:
                return _client
            raise RuntimeError("MongoDB client already initialized; call close_client() first")

        uri = mongo_uri or get_mongo_uri()
        try:
            client: AsyncMongoClient = AsyncMongoClient(uri)
        except ConfigurationError as e:
            # InvalidURI is a ConfigurationError
            logger.error("Error connecting to MongoDB", error=str(e))
            raise StoreConnectionError(str(e)) from e

        _client = client
        logger.info("Connected to MongoDB", database=settings.database_name)
        return _client


def get_client() -> AsyncMongoClient:
    """Get the shared MongoDB client, creating it on first use."""
    if _client is None:
        return init_client()
    return _client


def get_database(name: str | None = None) -> AsyncDatabase:
    """Get a handle to the portfolio database on the shared client."""
    return get_client()[name or settings.database_name]


async def close_client() -> None:
    """Close the shared client and its connection pool."""
    global _client
    with _init_lock:
        client, _client = _client, None
    if client is not None:
        await client.close()
        logger.info("MongoDB client closed")


async def check_database_connection() -> tuple[bool, str | None]:
    """
    Ping the database and return a helpful error message on failure.

    Returns:
        tuple: (success: bool, error_message: str | None)
    """
    try:
        database = get_database()
        await database.command("ping")
        return True, None
    except StoreConnectionError as e:
        return False, f"Invalid MongoDB connection string: {e}"
    except PyMongoError as e:
        error_str = str(e)
        error_type = type(e).__name__

        if "Authentication failed" in error_str or error_type == "OperationFailure":
            return False, (
                f"MongoDB authentication failed: {error_str}\n"
                f"Please check the credentials in the connection string."
            )
        elif error_type in ("ServerSelectionTimeoutError", "ConnectionFailure", "AutoReconnect"):
            return False, (
                f"Cannot connect to MongoDB server: {error_str}\n"
                f"The database server appears to be down or unreachable."
            )
        else:
            return False, f"Database connection error ({error_type}): {error_str}"
