"""
Profile ORM Model
=================

The ``Profile`` model is the singleton record describing the site owner: the
hero section, contact links and the headline numbers shown on the site. One
row is expected; it is created once (seed or admin) and then only updated.
"""

from datetime import datetime
from typing import Optional
from uuid import UUID

from sqlalchemy import TEXT, DateTime, Integer, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from portfolio_site.database.config.connection_engine import declarativeBase
from portfolio_site.database.entities.base import SerializableMixin, new_uuid, utc_now


class Profile(SerializableMixin, declarativeBase):
    """
    ORM model for the `profile` table.

    Attributes
    ----------
    name, title, subtitle : str
        Hero headline fields.
    bio : str | None
        Free-text biography.
    email : str
        Public contact address.
    linkedin, github_username, twitter_handle, stack_overflow_url : str | None
        Social links.
    location : str | None
        City/region shown on the site.
    years_experience, patent_count : int | None
        Headline counters.
    devices_deployed : str | None
        Free-text reach figure (e.g. "1B+").
    headshot_url, hero_background_url : str | None
        Image URLs (storage is external).
    updated_at : datetime
        Last update timestamp (UTC).
    """

    __tablename__ = "profile"

    id: Mapped[UUID] = mapped_column(Uuid, primary_key=True, default=new_uuid)
    name: Mapped[str] = mapped_column(TEXT, nullable=False)
    title: Mapped[str] = mapped_column(TEXT, nullable=False)
    subtitle: Mapped[str] = mapped_column(TEXT, nullable=False, default="")
    bio: Mapped[Optional[str]] = mapped_column(TEXT, nullable=True)
    email: Mapped[str] = mapped_column(TEXT, nullable=False, default="")
    linkedin: Mapped[Optional[str]] = mapped_column(TEXT, nullable=True)
    github_username: Mapped[Optional[str]] = mapped_column(TEXT, nullable=True)
    twitter_handle: Mapped[Optional[str]] = mapped_column(TEXT, nullable=True)
    stack_overflow_url: Mapped[Optional[str]] = mapped_column(TEXT, nullable=True)
    location: Mapped[Optional[str]] = mapped_column(TEXT, nullable=True)
    years_experience: Mapped[Optional[int]] = mapped_column(Integer, nullable=True)
    patent_count: Mapped[Optional[int]] = mapped_column(Integer, nullable=True)
    devices_deployed: Mapped[Optional[str]] = mapped_column(TEXT, nullable=True)
    headshot_url: Mapped[Optional[str]] = mapped_column(TEXT, nullable=True)
    hero_background_url: Mapped[Optional[str]] = mapped_column(TEXT, nullable=True)
    updated_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=utc_now, onupdate=utc_now)

    def __str__(self) -> str:
        return f"Profile: {self.name}, {self.title}"
