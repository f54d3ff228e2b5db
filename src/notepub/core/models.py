"""Data models for notepub."""

from datetime import datetime
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, field_validator


class FrontMatter(BaseModel):
    """Metadata header at the top of a post."""

    model_config = ConfigDict(extra="allow", coerce_numbers_to_str=True)

    title: str | None = None
    date: datetime | None = None
    tags: list[str] = Field(default_factory=list)

    @field_validator("tags", mode="before")
    @classmethod
    def _normalize_tags(cls, value):
        if value is None:
            return []
        if isinstance(value, (str, int, float)):
            return [str(value)]
        return value


class PublishRequest(BaseModel):
    """A note to publish and the tag to give it."""

    md_path: Path
    tag: str | None = None

    @field_validator("tag")
    @classmethod
    def _blank_tag_is_none(cls, value: str | None) -> str | None:
        if value is not None and not value.strip():
            return None
        return value


class PublishResult(BaseModel):
    """Outcome of a successful publish."""

    source: Path
    destination: Path
    front_matter_added: bool = False
