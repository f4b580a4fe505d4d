"""Document store lifecycle.

The application owns a single store instance, created at startup from
configuration and closed at shutdown.
"""

from typing import Optional

from .. import config
from .base import DocumentStore
from .memory import InMemoryDocumentStore

# Global store (set during API startup)
_store: Optional[DocumentStore] = None


def create_store(backend: Optional[str] = None) -> DocumentStore:
    """Build the store named by ``STORE_BACKEND`` (or ``backend``)."""
    backend = (backend or config.STORE_BACKEND).lower()
    if backend == "memory":
        return InMemoryDocumentStore()
    if backend == "firestore":
        # Import here so the memory backend works without Firebase installed
        from .firestore import FirestoreDocumentStore

        return FirestoreDocumentStore.from_config()
    raise ValueError(f"Unknown STORE_BACKEND: {backend!r}")


def set_store(store: DocumentStore) -> None:
    """Set the store. Called during API startup."""
    global _store
    _store = store


def get_store() -> DocumentStore:
    """Get the store. Raises if not initialized."""
    if _store is None:
        raise RuntimeError(
            "Document store not initialized. Ensure the API server is running."
        )
    return _store


async def close_store() -> None:
    """Close the store. Called during API shutdown."""
    global _store
    if _store is not None:
        await _store.close()
        _store = None
