from __future__ import annotations

from typing import Optional

from sqlalchemy import ForeignKey, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from .base import Base


class Stadium(Base):
    """Home ground; exactly one club per stadium and one stadium per club."""

    __tablename__ = "stadiums"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    stadium_name: Mapped[str] = mapped_column(String(255), nullable=False, index=True)
    capacity: Mapped[int] = mapped_column(Integer, nullable=False)
    stadium_image_url: Mapped[Optional[str]] = mapped_column(String(1024), nullable=True)
    club_id: Mapped[int] = mapped_column(
        ForeignKey("clubs.id", ondelete="CASCADE"), nullable=False, unique=True
    )
