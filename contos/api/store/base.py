"""Document store contract.

Collection-scoped async CRUD over flat JSON-like documents. There are no
cross-collection transactions; every call stands alone.
"""

from dataclasses import dataclass, field
from typing import Any, Protocol

# Collections
STORIES = "stories"
MUSIC = "music"
SITE = "site"

# Singleton document in the site collection
SITE_CONFIG_ID = "config"


@dataclass
class Document:
    """A stored document: its id and its field mapping."""

    id: str
    data: dict[str, Any] = field(default_factory=dict)


class DocumentStore(Protocol):
    """Defines the operations the services need from the document store.

    Implementations raise ``StoreError`` for any backend failure.
    """

    async def get(self, collection: str, doc_id: str) -> Document | None:
        ...

    async def list_documents(self, collection: str) -> list[Document]:
        ...

    async def add(self, collection: str, data: dict[str, Any]) -> str:
        ...

    async def update(self, collection: str, doc_id: str, patch: dict[str, Any]) -> None:
        ...

    async def set(
        self, collection: str, doc_id: str, data: dict[str, Any], merge: bool = False
    ) -> None:
        ...

    async def delete(self, collection: str, doc_id: str) -> None:
        ...

    async def close(self) -> None:
        ...
