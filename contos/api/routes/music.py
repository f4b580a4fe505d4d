"""Music endpoints. Uploads happen outside the API."""

from fastapi import APIRouter, status

from ..dependencies import AdminSession, MusicTracks
from ..models.responses import Music

router = APIRouter()


@router.get(
    "",
    response_model=list[Music],
    summary="List music tracks",
    description="Get every track, most recently uploaded first.",
)
async def list_music(service: MusicTracks):
    return await service.list_music()


@router.delete(
    "/{music_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete a music track",
    description="Admin only.",
)
async def delete_music(music_id: str, service: MusicTracks, admin: AdminSession):
    await service.delete_music(music_id)
