"""Sample gallery content loaded at startup."""

import logging
from datetime import UTC, datetime

from netra_gallery.domain.exhibitions import NewEvent, NewExhibition
from netra_gallery.domain.photographers import NewPhotographer
from netra_gallery.domain.photos import NewCategory, NewPhoto
from netra_gallery.services.categories import CategoryService
from netra_gallery.services.exhibitions import EventService, ExhibitionService
from netra_gallery.services.photographers import PhotographerService
from netra_gallery.services.photos import PhotoService

logger = logging.getLogger(__name__)

_UNSPLASH = "https://images.unsplash.com"
_UNSPLASH_QUERY = (
    "?ixlib=rb-4.0.3"
    "&ixid=M3wxMjA3fDB8MHxwaG90by1wYWdlfHx8fGVufDB8fHx8fA%3D%3D"
    "&auto=format&fit=crop"
)
_MAP_URL = (
    "https://www.google.com/maps/embed?pb=!1m18!1m12!1m3!1d3888.5831474374966"
    "!2d77.53410537518788!3d12.934193515666305!2m3!1f0!2f0!3f0!3m2!1i1024"
    "!2i768!4f13.1!3m3!1m2!1s0x0%3A0x0!2zMTLCsDU2JzAzLjEiTiA3N8KwMzInMTAuOCJF"
    "!5e0!3m2!1sen!2sin!4v1627980977128!5m2!1sen!2sin"
)


def _unsplash(photo_key: str, width: int) -> str:
    return f"{_UNSPLASH}/{photo_key}{_UNSPLASH_QUERY}&w={width}&q=80"


def sample_photographers() -> list[NewPhotographer]:
    """Return the club's featured photographers."""
    return [
        NewPhotographer(
            name="Aanya Sharma",
            bio=(
                "Specializes in portrait and street photography, capturing raw "
                "emotions and untold stories through her lens."
            ),
            profile_image=_unsplash("photo-1534528741775-53994a69daeb", 400),
            instagram="@aanya.frames",
            email="aanya.s@netra.club",
            featured=True,
        ),
        NewPhotographer(
            name="Vikram Nair",
            bio=(
                "Architecture and urban landscape photographer who finds beauty "
                "in geometric patterns and urban chaos."
            ),
            profile_image=_unsplash("photo-1564564321837-a57b7070ac4f", 400),
            instagram="@viks.perspective",
            email="vikram.n@netra.club",
            featured=True,
        ),
        NewPhotographer(
            name="Zara Patel",
            bio=(
                "Nature and wildlife photographer with a passion for documenting "
                "India's diverse ecosystems."
            ),
            profile_image=_unsplash("photo-1546961329-78bef0414d7c", 400),
            instagram="@zara.wilderness",
            email="zara.p@netra.club",
            featured=True,
        ),
    ]


def sample_categories() -> list[NewCategory]:
    """Return the gallery categories."""
    return [
        NewCategory(
            name="Portrait",
            description=(
                "The art of capturing personality and emotion in a single frame."
            ),
        ),
        NewCategory(
            name="Landscape",
            description="Breathtaking views of natural scenery and dramatic horizons.",
        ),
        NewCategory(
            name="Street",
            description="Candid moments from everyday life in urban environments.",
        ),
        NewCategory(
            name="Abstract",
            description=(
                "Photography that challenges perceptions through unconventional "
                "perspectives."
            ),
        ),
    ]


def _photo(  # noqa: PLR0913
    title: str,
    description: str,
    photo_key: str,
    photographer_id: int,
    category_id: int,
    *,
    featured: bool,
) -> NewPhoto:
    return NewPhoto(
        title=title,
        description=description,
        image_url=_unsplash(photo_key, 1600),
        thumbnail_url=_unsplash(photo_key, 400),
        photographer_id=photographer_id,
        category_id=category_id,
        featured=featured,
    )


def sample_photos() -> list[NewPhoto]:
    """Return gallery photos referencing the sample photographers and categories."""
    return [
        _photo(
            "Urban Reflections",
            "Modern architecture creating symmetrical patterns in glass and steel.",
            "photo-1500051638674-ff996a0ec29e",
            photographer_id=2,
            category_id=4,
            featured=True,
        ),
        _photo(
            "Mountain Serenity",
            "Dawn breaking over the Himalayan peaks, capturing the first light.",
            "photo-1536048810607-3dc7f86981cb",
            photographer_id=3,
            category_id=2,
            featured=True,
        ),
        _photo(
            "Candid Moments",
            "The joy of unexpected laughter captured in a split second.",
            "photo-1531123897727-8f129e1688ce",
            photographer_id=1,
            category_id=1,
            featured=True,
        ),
        _photo(
            "City Life",
            "The hustle and energy of metropolitan existence, frozen in time.",
            "photo-1605547560182-b491252b6b4f",
            photographer_id=1,
            category_id=3,
            featured=False,
        ),
        _photo(
            "Geometric Patterns",
            "Finding order and harmony in architectural elements.",
            "photo-1520853504280-249b72dc947c",
            photographer_id=2,
            category_id=4,
            featured=False,
        ),
        _photo(
            "Wildlife Majesty",
            "A royal Bengal tiger spotted in its natural habitat.",
            "photo-1615824996195-f780bba7cfab",
            photographer_id=3,
            category_id=2,
            featured=True,
        ),
    ]


def sample_exhibition() -> NewExhibition:
    """Return the Drishya exhibition."""
    return NewExhibition(
        name="Drishya",
        description=(
            "A visual journey through the lens of NETRA's talented photographers "
            "at Utkansh 2023. Experience diverse perspectives and artistic "
            "expressions captured in still frames."
        ),
        location="University Arts Gallery, Utkansh Building",
        start_date=datetime(2025, 4, 10, tzinfo=UTC),
        end_date=datetime(2025, 4, 13, 23, 59, 59, tzinfo=UTC),
        cover_image=_unsplash("photo-1576566588028-4147f3842f27", 1600),
        map_url=_MAP_URL,
    )


def sample_events(exhibition_id: int) -> list[NewEvent]:
    """Return the event schedule for an exhibition."""
    return [
        NewEvent(
            exhibition_id=exhibition_id,
            name="Opening Ceremony",
            description="Inauguration of Drishya exhibition by the Dean of Fine Arts.",
            date=datetime(2025, 4, 10, tzinfo=UTC),
            time="11:00 AM",
        ),
        NewEvent(
            exhibition_id=exhibition_id,
            name="Photography Workshop",
            description=(
                "Learn the basics of composition and lighting with master "
                "photographer Rajiv Mehta."
            ),
            date=datetime(2025, 4, 11, tzinfo=UTC),
            time="2:00 PM",
        ),
        NewEvent(
            exhibition_id=exhibition_id,
            name="Panel Discussion",
            description=(
                "The future of digital photography in the age of AI and "
                "computational imaging."
            ),
            date=datetime(2025, 4, 12, tzinfo=UTC),
            time="4:00 PM",
        ),
        NewEvent(
            exhibition_id=exhibition_id,
            name="Award Ceremony",
            description=(
                "Recognition of outstanding photographs and photographers from "
                "the exhibition."
            ),
            date=datetime(2025, 4, 13, tzinfo=UTC),
            time="5:00 PM",
        ),
    ]


def seed_sample_data(  # noqa: PLR0913
    *,
    photographer_service: PhotographerService,
    category_service: CategoryService,
    photo_service: PhotoService,
    exhibition_service: ExhibitionService,
    event_service: EventService,
) -> None:
    """Load the sample gallery into empty services.

    Photos reference photographers and categories by the ids they receive
    when seeded first into an empty store.
    """
    for new_photographer in sample_photographers():
        photographer_service.create(new_photographer)
    for new_category in sample_categories():
        category_service.create(new_category)
    for new_photo in sample_photos():
        photo_service.create(new_photo)
    created = exhibition_service.create(sample_exhibition())
    for new_event in sample_events(created.id):
        event_service.create(new_event)
    logger.info(
        "Seeded sample data: %d photographers, %d categories, %d photos, "
        "1 exhibition",
        len(photographer_service.list_all()),
        len(category_service.list_all()),
        len(photo_service.list_all()),
    )
