"""
Portfolio ORM Models
====================

Ordered list entities rendered by the public site sections and flattened by
the chat context builder:

- ``Skill``       — a skill category with its items and specializations
- ``Experience``  — a work-history entry with achievement bullets
- ``Patent``      — a patent with status ("Awarded" | "Contributor")
- ``Project``     — a notable project with its technologies
- ``Company``     — a "trusted by" logo entry

List-valued columns (items, achievements, technologies) are stored as JSON
arrays so the schema works on PostgreSQL and SQLite alike. Every table carries
``sort_order``, used for display ordering only.
"""

from typing import List, Optional
from uuid import UUID

from sqlalchemy import JSON, TEXT, Boolean, Integer, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from portfolio_site.database.config.connection_engine import declarativeBase
from portfolio_site.database.entities.base import SerializableMixin, new_uuid


class Skill(SerializableMixin, declarativeBase):
    """ORM model for the `skills` table."""

    __tablename__ = "skills"

    id: Mapped[UUID] = mapped_column(Uuid, primary_key=True, default=new_uuid)
    category: Mapped[str] = mapped_column(TEXT, nullable=False)
    title: Mapped[str] = mapped_column(TEXT, nullable=False)
    icon: Mapped[str] = mapped_column(TEXT, nullable=False)
    """Closed icon key, validated by the API layer (see ``api.models.IconKey``)."""
    color: Mapped[str] = mapped_column(TEXT, nullable=False, default="")
    items: Mapped[List[str]] = mapped_column(JSON, nullable=False, default=list)
    specializations: Mapped[List[str]] = mapped_column(JSON, nullable=False, default=list)
    sort_order: Mapped[int] = mapped_column(Integer, nullable=False, default=0)


class Experience(SerializableMixin, declarativeBase):
    """ORM model for the `experiences` table."""

    __tablename__ = "experiences"

    id: Mapped[UUID] = mapped_column(Uuid, primary_key=True, default=new_uuid)
    company: Mapped[str] = mapped_column(TEXT, nullable=False)
    company_logo_url: Mapped[Optional[str]] = mapped_column(TEXT, nullable=True)
    role: Mapped[str] = mapped_column(TEXT, nullable=False)
    period: Mapped[str] = mapped_column(TEXT, nullable=False)
    location: Mapped[Optional[str]] = mapped_column(TEXT, nullable=True)
    type: Mapped[str] = mapped_column(TEXT, nullable=False, default="")
    achievements: Mapped[List[str]] = mapped_column(JSON, nullable=False, default=list)
    sort_order: Mapped[int] = mapped_column(Integer, nullable=False, default=0)


class Patent(SerializableMixin, declarativeBase):
    """ORM model for the `patents` table."""

    __tablename__ = "patents"

    id: Mapped[UUID] = mapped_column(Uuid, primary_key=True, default=new_uuid)
    number: Mapped[str] = mapped_column(TEXT, nullable=False)
    title: Mapped[str] = mapped_column(TEXT, nullable=False)
    year: Mapped[str] = mapped_column(TEXT, nullable=False)
    company: Mapped[str] = mapped_column(TEXT, nullable=False)
    status: Mapped[str] = mapped_column(TEXT, nullable=False)
    description: Mapped[str] = mapped_column(TEXT, nullable=False, default="")
    category: Mapped[str] = mapped_column(TEXT, nullable=False, default="")
    image_url: Mapped[Optional[str]] = mapped_column(TEXT, nullable=True)
    sort_order: Mapped[int] = mapped_column(Integer, nullable=False, default=0)


class Project(SerializableMixin, declarativeBase):
    """ORM model for the `projects` table."""

    __tablename__ = "projects"

    id: Mapped[UUID] = mapped_column(Uuid, primary_key=True, default=new_uuid)
    title: Mapped[str] = mapped_column(TEXT, nullable=False)
    company: Mapped[str] = mapped_column(TEXT, nullable=False)
    role: Mapped[Optional[str]] = mapped_column(TEXT, nullable=True)
    description: Mapped[str] = mapped_column(TEXT, nullable=False)
    impact: Mapped[str] = mapped_column(TEXT, nullable=False, default="")
    icon: Mapped[str] = mapped_column(TEXT, nullable=False)
    color: Mapped[str] = mapped_column(TEXT, nullable=False, default="")
    technologies: Mapped[List[str]] = mapped_column(JSON, nullable=False, default=list)
    image_url: Mapped[Optional[str]] = mapped_column(TEXT, nullable=True)
    featured: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    sort_order: Mapped[int] = mapped_column(Integer, nullable=False, default=0)


class Company(SerializableMixin, declarativeBase):
    """ORM model for the `companies` table."""

    __tablename__ = "companies"

    id: Mapped[UUID] = mapped_column(Uuid, primary_key=True, default=new_uuid)
    name: Mapped[str] = mapped_column(TEXT, nullable=False)
    logo_url: Mapped[Optional[str]] = mapped_column(TEXT, nullable=True)
    sort_order: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
