"""
Document store and user lookup collaborators for the listing engine.

Usage:
    # Get store (auto-configured from env):
    from mediahub.stores import get_store

    store = get_store()
    await store.connect()

    # Or create specific implementation:
    from mediahub.stores import InMemoryDocumentStore

    store = InMemoryDocumentStore({"videos": [...], "users": [...]})
"""

from .base import DocumentStore, UserLookup
from .memory import InMemoryDocumentStore
from .postgres import PostgresDocumentStore
from .factory import StoreFactory


def get_store(force_reload: bool = False) -> DocumentStore:
    """Get configured store instance (factory convenience function)."""
    return StoreFactory.create(force_reload=force_reload)


__all__ = [
    'DocumentStore',
    'UserLookup',
    'InMemoryDocumentStore',
    'PostgresDocumentStore',
    'StoreFactory',
    'get_store',
]
