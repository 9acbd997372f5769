"""Pydantic models for themes."""

from pydantic import BaseModel, Field

from room_escape_api.app.models import Theme


class ThemeCreate(BaseModel):
    name: str = Field(..., min_length=1, examples=["Harry Potter"])
    description: str = Field("", examples=["Harry Potter and Dobby"])
    thumbnail: str = Field("", examples=["https://example.com/thumbnail.jpg"])


class ThemeResponse(BaseModel):
    id: int
    name: str
    description: str
    thumbnail: str

    @classmethod
    def from_theme(cls, theme: Theme) -> "ThemeResponse":
        return cls(
            id=theme.id,
            name=theme.name,
            description=theme.description,
            thumbnail=theme.thumbnail,
        )
