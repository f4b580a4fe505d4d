"""Process-local document store for development and tests."""

import copy
import secrets
import string
from typing import Any

from ..errors import StoreError
from .base import Document

_ID_ALPHABET = string.ascii_letters + string.digits
_ID_LENGTH = 20


def generate_id() -> str:
    """Random 20-character alphanumeric id, same shape as Firestore auto-ids."""
    return "".join(secrets.choice(_ID_ALPHABET) for _ in range(_ID_LENGTH))


class InMemoryDocumentStore:
    """Dict-backed ``DocumentStore``.

    Documents are deep-copied on the way in and out so callers never share
    state with the store. Iteration order is insertion order.
    """

    def __init__(self):
        self.collections: dict[str, dict[str, dict[str, Any]]] = {}

    def _collection(self, collection: str) -> dict[str, dict[str, Any]]:
        return self.collections.setdefault(collection, {})

    async def get(self, collection: str, doc_id: str) -> Document | None:
        data = self._collection(collection).get(doc_id)
        if data is None:
            return None
        return Document(id=doc_id, data=copy.deepcopy(data))

    async def list_documents(self, collection: str) -> list[Document]:
        return [
            Document(id=doc_id, data=copy.deepcopy(data))
            for doc_id, data in self._collection(collection).items()
        ]

    async def add(self, collection: str, data: dict[str, Any]) -> str:
        docs = self._collection(collection)
        doc_id = generate_id()
        while doc_id in docs:
            doc_id = generate_id()
        docs[doc_id] = copy.deepcopy(data)
        return doc_id

    async def update(self, collection: str, doc_id: str, patch: dict[str, Any]) -> None:
        docs = self._collection(collection)
        if doc_id not in docs:
            raise StoreError(f"No document to update: {collection}/{doc_id}")
        docs[doc_id].update(copy.deepcopy(patch))

    async def set(
        self, collection: str, doc_id: str, data: dict[str, Any], merge: bool = False
    ) -> None:
        docs = self._collection(collection)
        if merge and doc_id in docs:
            docs[doc_id].update(copy.deepcopy(data))
        else:
            docs[doc_id] = copy.deepcopy(data)

    async def delete(self, collection: str, doc_id: str) -> None:
        self._collection(collection).pop(doc_id, None)

    async def close(self) -> None:
        pass

    def reset(self) -> None:
        """Drop every collection."""
        self.collections.clear()
