"""Pydantic models for gallery API payloads.

Wire names are camelCase; Python attributes stay snake_case.
"""

from datetime import UTC, datetime
from typing import Annotated

from pydantic import (
    AfterValidator,
    BaseModel,
    ConfigDict,
    StrictBool,
    StrictInt,
    ValidationInfo,
    field_validator,
)
from pydantic.alias_generators import to_camel

from netra_gallery.domain.exhibitions import NewEvent, NewExhibition
from netra_gallery.domain.photographers import NewPhotographer
from netra_gallery.domain.photos import NewCategory, NewPhoto


def _assume_utc(value: datetime) -> datetime:
    """Treat naive datetimes as UTC."""
    if value.tzinfo is None:
        return value.replace(tzinfo=UTC)
    return value


UtcDatetime = Annotated[datetime, AfterValidator(_assume_utc)]


class CamelModel(BaseModel):
    """Base model that reads and writes camelCase keys."""

    model_config = ConfigDict(
        alias_generator=to_camel, populate_by_name=True, from_attributes=True
    )


class PhotographerCreate(CamelModel):
    """Request body for creating a photographer."""

    name: str
    bio: str
    profile_image: str
    instagram: str | None = None
    email: str | None = None
    featured: StrictBool | None = False

    def to_domain(self) -> NewPhotographer:
        return NewPhotographer(
            name=self.name,
            bio=self.bio,
            profile_image=self.profile_image,
            instagram=self.instagram,
            email=self.email,
            featured=bool(self.featured),
        )


class PhotographerOut(CamelModel):
    """Photographer response payload."""

    id: int
    name: str
    bio: str
    profile_image: str
    instagram: str | None
    email: str | None
    featured: bool


class CategoryCreate(CamelModel):
    """Request body for creating a category."""

    name: str
    description: str | None = None

    def to_domain(self) -> NewCategory:
        return NewCategory(name=self.name, description=self.description)


class CategoryOut(CamelModel):
    """Category response payload."""

    id: int
    name: str
    description: str | None


class PhotoCreate(CamelModel):
    """Request body for adding a photo."""

    title: str
    description: str | None = None
    image_url: str
    thumbnail_url: str
    photographer_id: StrictInt
    category_id: StrictInt
    featured: StrictBool | None = False

    def to_domain(self) -> NewPhoto:
        return NewPhoto(
            title=self.title,
            description=self.description,
            image_url=self.image_url,
            thumbnail_url=self.thumbnail_url,
            photographer_id=self.photographer_id,
            category_id=self.category_id,
            featured=bool(self.featured),
        )


class PhotoOut(CamelModel):
    """Photo response payload."""

    id: int
    title: str
    description: str | None
    image_url: str
    thumbnail_url: str
    photographer_id: int
    category_id: int
    featured: bool
    date_added: datetime


class ExhibitionCreate(CamelModel):
    """Request body for creating an exhibition."""

    name: str
    description: str
    location: str
    start_date: UtcDatetime
    end_date: UtcDatetime
    cover_image: str
    map_url: str | None = None

    @field_validator("end_date")
    @classmethod
    def check_end_after_start(
        cls, value: datetime, info: ValidationInfo
    ) -> datetime:
        start = info.data.get("start_date")
        if start is not None and _assume_utc(value) < _assume_utc(start):
            raise ValueError("endDate must not be before startDate")
        return value

    def to_domain(self) -> NewExhibition:
        return NewExhibition(
            name=self.name,
            description=self.description,
            location=self.location,
            start_date=self.start_date,
            end_date=self.end_date,
            cover_image=self.cover_image,
            map_url=self.map_url,
        )


class ExhibitionOut(CamelModel):
    """Exhibition response payload."""

    id: int
    name: str
    description: str
    location: str
    start_date: datetime
    end_date: datetime
    cover_image: str
    map_url: str | None


class EventCreate(CamelModel):
    """Request body for scheduling an exhibition event."""

    exhibition_id: StrictInt
    name: str
    description: str | None = None
    date: UtcDatetime
    time: str

    def to_domain(self) -> NewEvent:
        return NewEvent(
            exhibition_id=self.exhibition_id,
            name=self.name,
            description=self.description,
            date=self.date,
            time=self.time,
        )


class EventOut(CamelModel):
    """Event response payload."""

    id: int
    exhibition_id: int
    name: str
    description: str | None
    date: datetime
    time: str
