"""
HRMS Backend - MongoDB Connection Handle
=========================================

What:  The MongoDB client/database pair, its lifecycle helpers, and the
       FastAPI dependencies that hand it to route handlers.
How:   `MongoInstance.from_settings()` builds an `AsyncMongoClient` with a
       bounded connect/server-selection timeout. The lifespan handler in
       main.py creates one instance, verifies it with a ping, stores it on
       `app.state.mongo`, and closes it at shutdown.
Who:   main.py (lifecycle), routes (via Depends).
When:  Created once at startup; borrowed by every request.

Connection Pooling:
    The driver keeps its own pool per client and is safe to share across
    concurrent requests. The application adds no locking on top of it.
"""

import logging
from typing import Optional

from fastapi import Request
from pymongo import AsyncMongoClient
from pymongo.asynchronous.collection import AsyncCollection
from pymongo.asynchronous.database import AsyncDatabase
from pymongo.errors import PyMongoError

from hrms.config import Settings
from hrms.exceptions import DatabaseError

logger = logging.getLogger(__name__)


class MongoInstance:
    """
    Client + database handle for the employee store.

    Attributes:
        client:           The driver client (owns the connection pool)
        db:               Database handle resolved from the client
        collection_name:  Name of the employees collection
    """

    def __init__(
        self,
        client: AsyncMongoClient,
        database_name: str,
        collection_name: str,
    ):
        self.client = client
        self.db: AsyncDatabase = client[database_name]
        self.collection_name = collection_name

    @classmethod
    def from_settings(cls, config: Settings) -> "MongoInstance":
        """
        Build a client from settings without touching the network.

        The driver connects lazily; `verify()` forces the first round-trip.
        """
        client: AsyncMongoClient = AsyncMongoClient(
            config.mongo_uri,
            connectTimeoutMS=config.mongo_connect_timeout_ms,
            serverSelectionTimeoutMS=config.mongo_connect_timeout_ms,
        )
        return cls(client, config.mongo_database, config.mongo_collection)

    @property
    def employees(self) -> AsyncCollection:
        return self.db[self.collection_name]

    async def ping(self) -> bool:
        """Returns True if the server answers a ping within the timeout."""
        try:
            await self.client.admin.command("ping")
        except PyMongoError as e:
            logger.warning("MongoDB ping failed: %s", str(e))
            return False
        return True

    async def verify(self) -> None:
        """
        Ping the server once, raising DatabaseError if it is unreachable.

        Called during startup so the process refuses to serve without a store.
        """
        try:
            await self.client.admin.command("ping")
        except PyMongoError as e:
            raise DatabaseError(
                message=str(e),
                context={"operation": "connect", "error_type": type(e).__name__},
            ) from e
        logger.info(
            "Connected to MongoDB database '%s' (collection '%s')",
            self.db.name,
            self.collection_name,
        )

    async def close(self) -> None:
        """Close all pooled connections."""
        await self.client.close()


# ── Dependencies ──────────────────────────────────────────────────────────
def get_mongo(request: Request) -> MongoInstance:
    """
    FastAPI dependency returning the handle stored on the application.

    Raises:
        DatabaseError: The lifespan has not (or could not) set up a handle.
    """
    mongo: Optional[MongoInstance] = getattr(request.app.state, "mongo", None)
    if mongo is None:
        raise DatabaseError(
            message="Database connection is not initialized",
            context={"operation": "get_mongo"},
        )
    return mongo


def get_employee_collection(request: Request) -> AsyncCollection:
    """FastAPI dependency returning the employees collection."""
    return get_mongo(request).employees
