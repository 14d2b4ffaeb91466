"""Repository layer: the query/mutation surface over the persistence context.

Repositories take a :class:`core.context.FootballContext` explicitly, run
natural-key lookups under the retry policy and return
:class:`RepositoryResult` values. Not-found is returned, storage faults are
raised.
"""

from .base import BaseRepository, ClubMemberRepository
from .club_repo import ClubRepository
from .coach_repo import CoachRepository
from .footballer_repo import FootballerRepository
from .results import ErrorKind, RepositoryResult
from .stadium_repo import StadiumRepository
from .tournament_repo import TournamentRepository
from .views import (
    ClubDetails,
    CoachDetails,
    FootballerDetails,
    StadiumDetails,
    TournamentDetails,
)

__all__ = [
    "BaseRepository",
    "ClubMemberRepository",
    "ClubRepository",
    "CoachRepository",
    "FootballerRepository",
    "StadiumRepository",
    "TournamentRepository",
    "ErrorKind",
    "RepositoryResult",
    "ClubDetails",
    "CoachDetails",
    "FootballerDetails",
    "StadiumDetails",
    "TournamentDetails",
]
