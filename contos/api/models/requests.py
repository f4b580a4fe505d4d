"""Pydantic models for API requests."""

from typing import Any, Optional

from pydantic import AnyUrl, BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Base model speaking camelCase on the wire and in the store."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class AdminLoginRequest(BaseModel):
    """Login request with the shared admin password."""

    # Anything but the exact secret string is a mismatch, not a 400
    password: Any = None


class StoryInput(CamelModel):
    """Request body for creating or replacing a story.

    Any id or timestamps sent by the client are ignored.
    """

    title: str = Field(..., min_length=1, description="Story title")
    content: str = Field(..., min_length=1, description="Story text, formatting preserved")
    cover_image_url: str = Field(
        ...,
        min_length=1,
        description="Cover image URL or data URI",
        examples=["https://example.com/cover.png"],
    )


class MusicInput(CamelModel):
    """A music track registered by the out-of-band upload process."""

    name: str = Field(..., min_length=1)
    url: AnyUrl


class SiteConfigUpdate(CamelModel):
    """Partial site configuration. Only the fields sent are written."""

    primary_color: Optional[str] = None
    accent_color: Optional[str] = None
    secondary_color: Optional[str] = None
    background_color: Optional[str] = None
    foreground_color: Optional[str] = None
    hero_title: Optional[str] = None
    hero_subtitle: Optional[str] = None
    # Rendered unescaped by the site; trusted admin content only
    custom_html: Optional[str] = Field(default=None, alias="customHTML")

    @field_validator("*", mode="before")
    @classmethod
    def coerce_to_text(cls, value: Any) -> Any:
        """Numbers and booleans are stored as text; nested values are dropped."""
        if isinstance(value, bool):
            return "true" if value else "false"
        if isinstance(value, (int, float)):
            return str(value)
        if isinstance(value, (dict, list)):
            return None
        return value

    def to_patch(self) -> dict:
        """Fields present in the request, by wire name. Nulls count as absent."""
        return self.model_dump(by_alias=True, exclude_unset=True, exclude_none=True)
