from __future__ import annotations

from core.context import EntitySet
from models.stadium import Stadium

from .base import ClubMemberRepository
from .views import StadiumDetails


class StadiumRepository(ClubMemberRepository[Stadium, StadiumDetails]):
    """Repository for Stadium entities, keyed by stadium name."""

    model = Stadium
    key_attr = "stadium_name"
    label = "Stadium"
    mutable_fields = ("stadium_name", "capacity", "stadium_image_url")
    view = StadiumDetails

    @property
    def entities(self) -> EntitySet[Stadium]:
        return self.context.stadiums
