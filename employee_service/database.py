"""
Employee Service: Database Handle Management
===============================================

What:  Builds the MongoDB client handle at startup and exposes it to routes
       through FastAPI dependencies.
Why:   Centralizes all connection logic in one place.
How:   connect_database() creates an AsyncMongoClient, pings the server once,
       and returns an immutable DatabaseHandle. The lifespan in main.py stores
       the handle on app.state; get_database() and get_employees_collection()
       read it back per request.
Who:   Lifespan (connect/close) and route handlers (via Depends()).
When:  Handle is created once before serving; collections are looked up
       per request.

Connection Pooling:
    The driver owns pooling and thread/task safety. One client is shared by
    every in-flight request; nothing here locks or mutates it after startup.

Startup Timeout:
    serverSelectionTimeoutMS bounds the startup ping. If no server answers in
    time the driver raises ServerSelectionTimeoutError and startup aborts.
"""

import logging
from dataclasses import dataclass

from fastapi import Request
from pymongo import AsyncMongoClient
from pymongo.asynchronous.collection import AsyncCollection
from pymongo.asynchronous.database import AsyncDatabase

from employee_service.config import Settings, settings
from employee_service.exceptions import DatabaseError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DatabaseHandle:
    """Client plus the application database, fixed for the process lifetime."""

    client: AsyncMongoClient
    database: AsyncDatabase
    employees_collection: str = "employees"

    @property
    def employees(self) -> AsyncCollection:
        return self.database[self.employees_collection]


async def connect_database(config: Settings = settings) -> DatabaseHandle:
    """
    Connect to MongoDB and verify the server is reachable.

    Raises:
        pymongo.errors.PyMongoError: the server could not be reached within
        config.mongo_connect_timeout seconds. The caller treats this as fatal.
    """
    # What: One pooled client for the whole process
    # Why both timeouts: selection bounds the wait for a usable server,
    # connect bounds each socket handshake
    client: AsyncMongoClient = AsyncMongoClient(
        config.mongo_url,
        serverSelectionTimeoutMS=config.mongo_timeout_ms,
        connectTimeoutMS=config.mongo_timeout_ms,
    )
    # The constructor never touches the network; ping forces server selection
    try:
        await client.admin.command("ping")
    except Exception:
        # Release the pool before propagating so startup failure leaks nothing
        await client.close()
        raise

    logger.info("Connected to MongoDB database '%s'", config.mongo_database)
    return DatabaseHandle(
        client=client,
        database=client[config.mongo_database],
        employees_collection=config.employees_collection,
    )


async def close_database(handle: DatabaseHandle) -> None:
    """Gracefully closes all pooled connections. Called at shutdown."""
    await handle.client.close()


# ── Request Dependencies ──────────────────────────────────────────────────
def get_database(request: Request) -> DatabaseHandle:
    """
    FastAPI dependency returning the handle built by the lifespan.

    Raises DatabaseError when the application is serving without a handle,
    which only happens if the lifespan did not run.
    """
    handle = getattr(request.app.state, "database", None)
    if handle is None:
        raise DatabaseError(context={"reason": "database handle not initialized"})
    return handle


def get_employees_collection(request: Request) -> AsyncCollection:
    """FastAPI dependency returning the `employees` collection."""
    return get_database(request).employees
