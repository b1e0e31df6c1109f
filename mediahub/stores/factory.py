"""
Factory to create document store instances based on configuration.
"""

from typing import Optional
import os
import logging

from .base import DocumentStore
from .memory import InMemoryDocumentStore
from .postgres import PostgresDocumentStore

logger = logging.getLogger(__name__)


class StoreFactory:
    """Factory to create document store instances based on configuration."""

    _instance: Optional[DocumentStore] = None  # Singleton cache

    @classmethod
    def create(cls, force_reload: bool = False) -> DocumentStore:
        """
        Create document store based on environment configuration.

        Config (env vars):
            STORE_TYPE: "postgres" | "memory"
            DATABASE_URL: PostgreSQL connection string (postgres only)
            MEMORY_SEED_FILE: Optional JSON seed file (memory only)

        Supported types:
            - postgres: asyncpg + JSONB collections (production)
            - memory: dict-backed store for local development

        Args:
            force_reload: If True, recreate instance even if cached

        Returns:
            Store instance (implements DocumentStore and UserLookup)
        """
        # Return cached instance
        if cls._instance is not None and not force_reload:
            return cls._instance

        store_type = os.getenv("STORE_TYPE")
        if not store_type:
            raise ValueError("STORE_TYPE environment variable is required")
        store_type = store_type.lower()

        if store_type == "postgres":
            database_url = os.getenv("DATABASE_URL")
            if not database_url:
                raise ValueError("DATABASE_URL environment variable is required when STORE_TYPE=postgres")
            logger.info("Creating PostgreSQL document store")
            cls._instance = PostgresDocumentStore(database_url=database_url)

        elif store_type == "memory":
            seed_file = os.getenv("MEMORY_SEED_FILE")
            logger.info(f"Creating in-memory document store (seed={seed_file or 'none'})")
            cls._instance = InMemoryDocumentStore(seed_file=seed_file)

        else:
            raise ValueError(
                f"Unknown store type: {store_type}. "
                f"Valid options: postgres, memory"
            )

        return cls._instance

    @classmethod
    def cleanup(cls):
        """Drop the cached store instance."""
        if cls._instance is not None:
            logger.info("Cleaning up store instance")
            cls._instance = None
