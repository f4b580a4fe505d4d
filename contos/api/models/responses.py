"""Pydantic models for API responses."""

from typing import Optional

from pydantic import Field

from .requests import CamelModel

DEFAULT_HERO_SUBTITLE = (
    "Embarque em uma jornada através de contos encantadores, embalados por "
    "músicas suaves e uma atmosfera de noite estrelada."
)


class Story(CamelModel):
    """A published story. Timestamps are epoch milliseconds set by the server."""

    id: str
    title: str
    content: str
    cover_image_url: str
    created_at: int
    updated_at: int


class Music(CamelModel):
    """A background music track."""

    id: str
    name: str
    url: str
    uploaded_at: int


class SiteConfig(CamelModel):
    """Site appearance. Colors are "H S% L%" strings, not validated."""

    primary_color: str = "270 70% 55%"
    accent_color: str = "300 35% 90%"
    secondary_color: str = "280 25% 85%"
    background_color: str = "240 25% 97%"
    foreground_color: str = "240 20% 15%"
    hero_title: str = "Histórias Mágicas"
    hero_subtitle: str = DEFAULT_HERO_SUBTITLE
    custom_html: str = Field(default="", alias="customHTML")
    updated_at: Optional[int] = None


class SiteConfigUpdateResponse(CamelModel):
    """Acknowledgement of a site config write, echoing the applied fields."""

    success: bool = True
    data: dict


class SuccessResponse(CamelModel):
    success: bool = True


class AdminStatusResponse(CamelModel):
    is_admin: bool
