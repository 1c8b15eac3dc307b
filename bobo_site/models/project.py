# File: bobo_site/models/project.py

"""
Project model.

One row per film / TV production shown in the showcase list.
"""

from datetime import datetime

from sqlalchemy import DateTime, Integer, String, Text, func
from sqlalchemy.orm import Mapped, mapped_column

from bobo_site.models.base import Base

FILM = "film"
TV = "tv"
CATEGORIES = (FILM, TV)


class Project(Base):
    __tablename__ = "projects"
    # AUTOINCREMENT so SQLite never hands out the id of a deleted row again
    __table_args__ = {"sqlite_autoincrement": True}

    id: Mapped[int] = mapped_column(Integer, primary_key=True, index=True)
    title: Mapped[str] = mapped_column(String(255), nullable=False)
    year: Mapped[int | None] = mapped_column(Integer, nullable=True)
    category: Mapped[str] = mapped_column(String(16), nullable=False, default=FILM)

    # External poster link, and the /uploads/posters/... path of an uploaded one
    poster_url: Mapped[str | None] = mapped_column(Text, nullable=True)
    poster_local: Mapped[str | None] = mapped_column(Text, nullable=True)

    dop: Mapped[str | None] = mapped_column(Text, nullable=True)
    bobo_crew: Mapped[str | None] = mapped_column(Text, nullable=True)
    imdb_url: Mapped[str | None] = mapped_column(Text, nullable=True)
    tmdb_url: Mapped[str | None] = mapped_column(Text, nullable=True)
    trailer_url: Mapped[str | None] = mapped_column(Text, nullable=True)
    production_company: Mapped[str | None] = mapped_column(Text, nullable=True)
    synopsis: Mapped[str | None] = mapped_column(Text, nullable=True)

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        server_default=func.now(),
        nullable=False,
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        server_default=func.now(),
        onupdate=func.now(),
        nullable=False,
    )
