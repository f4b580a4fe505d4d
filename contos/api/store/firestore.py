"""Cloud Firestore implementation of the document store."""

import json
import logging
from contextlib import contextmanager
from typing import Any, Iterator, Optional

import firebase_admin
from firebase_admin import credentials, firestore_async
from google.api_core import exceptions as google_exceptions

from .. import config
from ..errors import StoreError
from .base import Document

logger = logging.getLogger(__name__)

FIREBASE_APP_NAME = "contos"


def load_credentials() -> credentials.Certificate:
    """Build service-account credentials from the environment.

    ``FIREBASE_CREDENTIALS`` (the whole JSON document) wins over the
    individual project id / client email / private key variables.
    """
    if config.FIREBASE_CREDENTIALS:
        try:
            cred_dict = json.loads(config.FIREBASE_CREDENTIALS)
        except json.JSONDecodeError:
            raise ValueError("Invalid JSON in FIREBASE_CREDENTIALS")
        return credentials.Certificate(cred_dict)

    if not (config.FIREBASE_PROJECT_ID and config.FIREBASE_CLIENT_EMAIL and config.FIREBASE_PRIVATE_KEY):
        raise ValueError(
            "Firestore backend needs FIREBASE_CREDENTIALS or FIREBASE_PROJECT_ID, "
            "FIREBASE_CLIENT_EMAIL and FIREBASE_PRIVATE_KEY"
        )

    return credentials.Certificate(
        {
            "type": "service_account",
            "project_id": config.FIREBASE_PROJECT_ID,
            "client_email": config.FIREBASE_CLIENT_EMAIL,
            # Keys pasted into env files usually carry escaped newlines
            "private_key": config.FIREBASE_PRIVATE_KEY.replace("\\n", "\n"),
            "token_uri": "https://oauth2.googleapis.com/token",
        }
    )


@contextmanager
def _store_errors(action: str) -> Iterator[None]:
    """Translate Google API failures into StoreError."""
    try:
        yield
    except google_exceptions.GoogleAPIError as e:
        raise StoreError(f"Firestore {action} failed: {e}") from e


class FirestoreDocumentStore:
    """``DocumentStore`` backed by the async Firestore client."""

    def __init__(self, client, app: Optional[firebase_admin.App] = None):
        self.client = client
        self.app = app

    @classmethod
    def from_config(cls) -> "FirestoreDocumentStore":
        """Initialize a dedicated Firebase app from environment credentials."""
        try:
            app = firebase_admin.get_app(FIREBASE_APP_NAME)
        except ValueError:
            app = firebase_admin.initialize_app(load_credentials(), name=FIREBASE_APP_NAME)
        logger.info("Connected Firestore document store")
        return cls(firestore_async.client(app), app=app)

    async def get(self, collection: str, doc_id: str) -> Document | None:
        with _store_errors(f"get {collection}/{doc_id}"):
            snapshot = await self.client.collection(collection).document(doc_id).get()
        if not snapshot.exists:
            return None
        return Document(id=snapshot.id, data=snapshot.to_dict() or {})

    async def list_documents(self, collection: str) -> list[Document]:
        documents = []
        with _store_errors(f"list {collection}"):
            async for snapshot in self.client.collection(collection).stream():
                documents.append(Document(id=snapshot.id, data=snapshot.to_dict() or {}))
        return documents

    async def add(self, collection: str, data: dict[str, Any]) -> str:
        with _store_errors(f"add to {collection}"):
            _, doc_ref = await self.client.collection(collection).add(data)
        return doc_ref.id

    async def update(self, collection: str, doc_id: str, patch: dict[str, Any]) -> None:
        with _store_errors(f"update {collection}/{doc_id}"):
            await self.client.collection(collection).document(doc_id).update(patch)

    async def set(
        self, collection: str, doc_id: str, data: dict[str, Any], merge: bool = False
    ) -> None:
        with _store_errors(f"set {collection}/{doc_id}"):
            await self.client.collection(collection).document(doc_id).set(data, merge=merge)

    async def delete(self, collection: str, doc_id: str) -> None:
        with _store_errors(f"delete {collection}/{doc_id}"):
            await self.client.collection(collection).document(doc_id).delete()

    async def close(self) -> None:
        if self.app is not None:
            firebase_admin.delete_app(self.app)
            self.app = None
