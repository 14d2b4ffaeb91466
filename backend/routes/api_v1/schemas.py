"""Request commands and response bodies for the v1 API."""

from __future__ import annotations

from datetime import date
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

# Earliest founding year accepted for a club (exclusive).
MIN_FOUNDED_YEAR = 1857


def _capitalised(value: str, label: str) -> str:
    value = (value or "").strip()
    if not value:
        raise ValueError(f"The {label} must not be empty")
    if not value[0].isupper():
        raise ValueError(f"The {label} must be in upper case")
    return value


class ClubCommand(BaseModel):
    """Body for POST /clubs and PUT /clubs/{club_name}."""

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "club_name": "Arsenal",
                "city": "London",
                "founded": "1886-01-01",
                "club_image_url": None,
            }
        }
    )

    club_name: str
    city: str
    founded: date
    club_image_url: Optional[str] = None

    @field_validator("club_name")
    @classmethod
    def _club_name(cls, v: str) -> str:
        return _capitalised(v, "club's name")

    @field_validator("city")
    @classmethod
    def _city(cls, v: str) -> str:
        return _capitalised(v, "city's name")

    @field_validator("founded")
    @classmethod
    def _founded(cls, v: date) -> date:
        if not (MIN_FOUNDED_YEAR < v.year <= date.today().year):
            raise ValueError(
                f"founded year must be after {MIN_FOUNDED_YEAR} and not in the future"
            )
        return v


class PersonCommand(BaseModel):
    name: str
    surname: str
    current_club: str = Field(..., min_length=1, description="Name of the club the person belongs to")

    @field_validator("name")
    @classmethod
    def _name(cls, v: str) -> str:
        return _capitalised(v, "name")

    @field_validator("surname")
    @classmethod
    def _surname(cls, v: str) -> str:
        return _capitalised(v, "surname")


class CoachCommand(PersonCommand):
    """Body for POST /coaches and PUT /coaches/{surname}."""


class FootballerCommand(PersonCommand):
    """Body for POST /footballers and PUT /footballers/{surname}."""


class StadiumCommand(BaseModel):
    """Body for POST /stadiums and PUT /stadiums/{stadium_name}."""

    stadium_name: str
    capacity: int = Field(..., gt=0)
    club: str = Field(..., min_length=1, description="Name of the owning club")
    stadium_image_url: Optional[str] = None

    @field_validator("stadium_name")
    @classmethod
    def _stadium_name(cls, v: str) -> str:
        return _capitalised(v, "stadium's name")


class TournamentCommand(BaseModel):
    """Body for POST /tournaments."""

    tournament_name: str

    @field_validator("tournament_name")
    @classmethod
    def _tournament_name(cls, v: str) -> str:
        return _capitalised(v, "tournament's name")


class StadiumSummary(BaseModel):
    stadium_name: str
    stadium_image_url: Optional[str] = None
    capacity: int


class CoachSummary(BaseModel):
    full_name: str


class ClubResponse(BaseModel):
    club_name: str
    club_image_url: Optional[str] = None
    city: str
    founded: date
    age: int
    stadium: Optional[StadiumSummary] = None
    coach: Optional[CoachSummary] = None
    footballers: List[str] = Field(default_factory=list)
    tournaments: List[str] = Field(default_factory=list)


class CoachResponse(BaseModel):
    full_name: str
    current_club: str


class FootballerResponse(BaseModel):
    full_name: str
    current_club: Optional[str] = None


class StadiumResponse(BaseModel):
    stadium_name: str
    capacity: int
    stadium_image_url: Optional[str] = None
    club: str


class TournamentResponse(BaseModel):
    tournament_name: str
    clubs: List[str] = Field(default_factory=list)
