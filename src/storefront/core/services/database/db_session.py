"""MongoDB client and database handles shared across the application."""

import threading

from loguru import logger
from pymongo import MongoClient
from pymongo.collection import Collection
from pymongo.database import Database
from pymongo.errors import PyMongoError

from storefront.runtime.config.config_data import DatabaseConfig


class MongoConnectionService:
    """Owns the single ``MongoClient`` used by every request handler.

    The client is created on the first ``connect()`` call. Concurrent first
    calls are serialised by a lock so exactly one client is ever built;
    later calls return it without re-dialing.
    """

    def __init__(self, db_config: DatabaseConfig) -> None:
        self._config = db_config
        self._client: MongoClient | None = None
        self._lock = threading.Lock()

    @property
    def is_connected(self) -> bool:
        return self._client is not None

    def connect(self) -> MongoClient:
        """Return the shared client, creating it on first use."""
        client = self._client
        if client is not None:
            return client

        with self._lock:
            if self._client is None:
                logger.info(
                    "Connecting to MongoDB at {} (database {})",
                    self._config.redacted_url,
                    self._config.name,
                )
                self._client = self._create_client()
            return self._client

    def _create_client(self) -> MongoClient:
        kwargs = {
            "serverSelectionTimeoutMS": self._config.server_selection_timeout_ms,
            "tz_aware": True,
        }
        if self._config.app_name:
            kwargs["appname"] = self._config.app_name
        return MongoClient(self._config.url, **kwargs)

    def get_database(self) -> Database:
        return self.connect()[self._config.name]

    def get_collection(self, name: str) -> Collection:
        return self.get_database()[name]

    def get_products_collection(self) -> Collection:
        return self.get_collection(self._config.products_collection)

    def health_check(self) -> bool:
        """Ping the server; False when it cannot be reached."""
        try:
            self.connect().admin.command("ping")
            return True
        except PyMongoError as e:
            logger.error(
                "Database health check failed: {}: {}", type(e).__name__, e
            )
            return False

    def close(self) -> None:
        with self._lock:
            if self._client is not None:
                logger.info("Closing MongoDB connection")
                self._client.close()
                self._client = None
