"""Document store adapters."""

from .base import MUSIC, SITE, SITE_CONFIG_ID, STORIES, Document, DocumentStore
from .client import close_store, create_store, get_store, set_store
from .memory import InMemoryDocumentStore

__all__ = [
    # Contract
    "Document",
    "DocumentStore",
    "STORIES",
    "MUSIC",
    "SITE",
    "SITE_CONFIG_ID",
    # Adapters
    "InMemoryDocumentStore",
    # Lifecycle
    "create_store",
    "set_store",
    "get_store",
    "close_store",
]
