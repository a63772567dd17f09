"""
Publishing ORM Models
=====================

- ``BlogPost``     — markdown/HTML posts with a draft/published lifecycle
- ``Testimonial``  — quotes shown on the consulting page
- ``MediaAsset``   — carousel/media metadata (the bytes live in external storage)
"""

from datetime import datetime
from typing import Optional
from uuid import UUID

from sqlalchemy import TEXT, DateTime, Integer, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from portfolio_site.database.config.connection_engine import declarativeBase
from portfolio_site.database.entities.base import SerializableMixin, new_uuid, utc_now

BLOG_STATUS_DRAFT = "draft"
BLOG_STATUS_PUBLISHED = "published"


class BlogPost(SerializableMixin, declarativeBase):
    """
    ORM model for the `blog_posts` table.

    Attributes
    ----------
    slug : str
        Unique URL key for the post.
    status : str
        "draft" or "published"; only published posts are publicly readable.
    published_at : datetime | None
        Publication timestamp, set when the post is first published.
    """

    __tablename__ = "blog_posts"

    id: Mapped[UUID] = mapped_column(Uuid, primary_key=True, default=new_uuid)
    title: Mapped[str] = mapped_column(TEXT, nullable=False)
    slug: Mapped[str] = mapped_column(TEXT, nullable=False, unique=True)
    content: Mapped[str] = mapped_column(TEXT, nullable=False)
    excerpt: Mapped[Optional[str]] = mapped_column(TEXT, nullable=True)
    status: Mapped[str] = mapped_column(TEXT, nullable=False, default=BLOG_STATUS_DRAFT)
    published_at: Mapped[Optional[datetime]] = mapped_column(DateTime(timezone=True), nullable=True)
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False, default=utc_now)
    updated_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False, default=utc_now, onupdate=utc_now)


class Testimonial(SerializableMixin, declarativeBase):
    """ORM model for the `testimonials` table."""

    __tablename__ = "testimonials"

    id: Mapped[UUID] = mapped_column(Uuid, primary_key=True, default=new_uuid)
    author: Mapped[str] = mapped_column(TEXT, nullable=False)
    role: Mapped[Optional[str]] = mapped_column(TEXT, nullable=True)
    company: Mapped[Optional[str]] = mapped_column(TEXT, nullable=True)
    quote: Mapped[str] = mapped_column(TEXT, nullable=False)
    avatar_url: Mapped[Optional[str]] = mapped_column(TEXT, nullable=True)
    sort_order: Mapped[int] = mapped_column(Integer, nullable=False, default=0)


class MediaAsset(SerializableMixin, declarativeBase):
    """ORM model for the `media_assets` table."""

    __tablename__ = "media_assets"

    id: Mapped[UUID] = mapped_column(Uuid, primary_key=True, default=new_uuid)
    url: Mapped[str] = mapped_column(TEXT, nullable=False)
    caption: Mapped[Optional[str]] = mapped_column(TEXT, nullable=True)
    kind: Mapped[str] = mapped_column(TEXT, nullable=False, default="image")
    sort_order: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
