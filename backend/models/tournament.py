from __future__ import annotations

from sqlalchemy import ForeignKey, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from .base import Base


class Tournament(Base):
    """Competition that clubs take part in."""

    __tablename__ = "tournaments"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    tournament_name: Mapped[str] = mapped_column(String(255), nullable=False, index=True)


class ClubTournament(Base):
    """Membership of a club in a tournament. No lifecycle of its own."""

    __tablename__ = "club_tournaments"

    club_id: Mapped[int] = mapped_column(
        ForeignKey("clubs.id", ondelete="CASCADE"), primary_key=True
    )
    tournament_id: Mapped[int] = mapped_column(
        ForeignKey("tournaments.id", ondelete="CASCADE"), primary_key=True, index=True
    )
