"""Read views: an entity together with its eagerly loaded relations.

Relations are resolved by id when the view is built; the models themselves
hold foreign keys only, so views never form reference cycles.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional

from models import Club, Coach, Footballer, Stadium, Tournament


@dataclass(frozen=True)
class ClubDetails:
    club: Club
    coach: Optional[Coach] = None
    stadium: Optional[Stadium] = None
    footballers: List[Footballer] = field(default_factory=list)
    tournaments: List[Tournament] = field(default_factory=list)


@dataclass(frozen=True)
class CoachDetails:
    coach: Coach
    club: Club


@dataclass(frozen=True)
class FootballerDetails:
    footballer: Footballer
    club: Optional[Club] = None


@dataclass(frozen=True)
class StadiumDetails:
    stadium: Stadium
    club: Club


@dataclass(frozen=True)
class TournamentDetails:
    tournament: Tournament
    clubs: List[Club] = field(default_factory=list)
