from __future__ import annotations

from datetime import date
from typing import Optional

from sqlalchemy import Date, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from .base import Base


class Club(Base):
    """Football club. Owns at most one coach and stadium, any number of footballers."""

    __tablename__ = "clubs"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    # Lookup key; not unique at the storage layer.
    club_name: Mapped[str] = mapped_column(String(255), nullable=False, index=True)
    city: Mapped[str] = mapped_column(String(255), nullable=False)
    founded: Mapped[date] = mapped_column(Date, nullable=False)
    club_image_url: Mapped[Optional[str]] = mapped_column(String(1024), nullable=True)
