"""Domain models for club photographers."""

from dataclasses import dataclass


@dataclass(frozen=True)
class NewPhotographer:
    """Caller-supplied fields for a photographer."""

    name: str
    bio: str
    profile_image: str
    instagram: str | None = None
    email: str | None = None
    featured: bool = False

    def to_record(self, photographer_id: int) -> "Photographer":
        """Return the stored photographer for the assigned id."""
        return Photographer(
            id=photographer_id,
            name=self.name,
            bio=self.bio,
            profile_image=self.profile_image,
            instagram=self.instagram,
            email=self.email,
            featured=self.featured,
        )


@dataclass(frozen=True)
class Photographer:
    """A photographer profile shown in the gallery."""

    id: int
    name: str
    bio: str
    profile_image: str
    instagram: str | None
    email: str | None
    featured: bool
