"""SQLAlchemy models for the football manager schema.

Models carry foreign-key columns only; related rows are resolved by id in the
repository layer rather than through mapped object references.
"""

from .base import Base
from .club import Club
from .coach import Coach
from .footballer import Footballer
from .stadium import Stadium
from .tournament import ClubTournament, Tournament

__all__ = [
    "Base",
    "Club",
    "ClubTournament",
    "Coach",
    "Footballer",
    "Stadium",
    "Tournament",
]
