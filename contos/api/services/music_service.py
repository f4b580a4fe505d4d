"""Music service.

Tracks are uploaded by a separate process that writes straight into the
``music`` collection; through the API they can only be listed and deleted.
"""

import logging

from pydantic import ValidationError as PydanticValidationError

from ..errors import NotFound
from ..logging import content_logger
from ..models.responses import Music
from ..store import MUSIC, DocumentStore

logger = logging.getLogger(__name__)


class MusicService:
    """Service for listing and removing music tracks."""

    def __init__(self, store: DocumentStore):
        self.store = store

    async def list_music(self) -> list[Music]:
        """All tracks, most recently uploaded first.

        Records the upload process wrote without the required fields are
        left out of the listing and logged.
        """
        docs = await self.store.list_documents(MUSIC)
        tracks = []
        for doc in docs:
            try:
                tracks.append(Music.model_validate({**doc.data, "id": doc.id}))
            except PydanticValidationError as e:
                logger.warning(
                    f"Skipping malformed music record {doc.id}: {e.error_count()} errors",
                    extra={"resource": "Music", "resource_id": doc.id},
                )
        tracks.sort(key=lambda track: track.uploaded_at, reverse=True)
        return tracks

    async def delete_music(self, music_id: str) -> None:
        if await self.store.get(MUSIC, music_id) is None:
            raise NotFound.for_resource("Music")
        await self.store.delete(MUSIC, music_id)
        content_logger.deleted("Music", music_id)
