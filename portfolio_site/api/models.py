"""
Pydantic models used for request validation and API data contracts.

Every content resource has an ``*In`` model (create; required fields
enforced) and an ``*Update`` model (PATCH; every field optional, only the
fields actually sent are applied; an explicit null for a NOT NULL column is
rejected with 422). Icon fields only accept the closed
`IconKey` set, so an unknown icon is rejected with 422 at write time.
"""

from datetime import datetime
from enum import Enum
from typing import ClassVar, List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from portfolio_site.database.entities import (
    BlogPost,
    ChatContextDoc,
    ChatPrompt,
    Company,
    Experience,
    MediaAsset,
    Patent,
    Profile,
    Project,
    Skill,
    Testimonial,
)


class IconKey(str, Enum):
    """Icon names the frontend knows how to render."""

    BOT = "Bot"
    BRAIN = "Brain"
    CLOUD = "Cloud"
    CODE2 = "Code2"
    CPU = "Cpu"
    DATABASE = "Database"
    GLOBE = "Globe"
    LAYERS = "Layers"
    SERVER = "Server"
    SHIELD = "Shield"
    SMARTPHONE = "Smartphone"
    VIDEO = "Video"
    WRENCH = "Wrench"
    ZAP = "Zap"


PatentStatus = Literal["Awarded", "Contributor"]
BlogStatus = Literal["draft", "published"]


class ContentModel(BaseModel):
    """Base for write models; enums are stored by value."""

    model_config = ConfigDict(use_enum_values=True, extra="forbid")

    entity: ClassVar[Optional[type]] = None
    """ORM entity whose NOT NULL columns refuse an explicit null."""

    @model_validator(mode="after")
    def reject_null_for_required_columns(self):
        if self.entity is None:
            return self
        columns = self.entity.__table__.columns
        nulls = sorted(
            name
            for name in self.model_fields_set
            if getattr(self, name) is None and name in columns and not columns[name].nullable
        )
        if nulls:
            raise ValueError(f"{', '.join(nulls)} cannot be null")
        return self

    def changes(self) -> dict:
        """Only the fields the client actually sent."""
        return self.model_dump(exclude_unset=True)


# -- Profile ---------------------------------------------------------------
class ProfileIn(ContentModel):
    name: str = Field(..., min_length=1)
    title: str
    subtitle: str = ""
    bio: Optional[str] = None
    email: str = ""
    linkedin: Optional[str] = None
    github_username: Optional[str] = None
    twitter_handle: Optional[str] = None
    stack_overflow_url: Optional[str] = None
    location: Optional[str] = None
    years_experience: Optional[int] = Field(None, ge=0)
    patent_count: Optional[int] = Field(None, ge=0)
    devices_deployed: Optional[str] = None
    headshot_url: Optional[str] = None
    hero_background_url: Optional[str] = None


class ProfileUpdate(ContentModel):
    entity = Profile

    name: Optional[str] = Field(None, min_length=1)
    title: Optional[str] = None
    subtitle: Optional[str] = None
    bio: Optional[str] = None
    email: Optional[str] = None
    linkedin: Optional[str] = None
    github_username: Optional[str] = None
    twitter_handle: Optional[str] = None
    stack_overflow_url: Optional[str] = None
    location: Optional[str] = None
    years_experience: Optional[int] = Field(None, ge=0)
    patent_count: Optional[int] = Field(None, ge=0)
    devices_deployed: Optional[str] = None
    headshot_url: Optional[str] = None
    hero_background_url: Optional[str] = None


# -- Portfolio sections ----------------------------------------------------
class SkillIn(ContentModel):
    category: str
    title: str
    icon: IconKey
    color: str = ""
    items: List[str] = []
    specializations: List[str] = []
    sort_order: int = 0


class SkillUpdate(ContentModel):
    entity = Skill

    category: Optional[str] = None
    title: Optional[str] = None
    icon: Optional[IconKey] = None
    color: Optional[str] = None
    items: Optional[List[str]] = None
    specializations: Optional[List[str]] = None
    sort_order: Optional[int] = None


class ExperienceIn(ContentModel):
    company: str
    company_logo_url: Optional[str] = None
    role: str
    period: str
    location: Optional[str] = None
    type: str = ""
    achievements: List[str] = []
    sort_order: int = 0


class ExperienceUpdate(ContentModel):
    entity = Experience

    company: Optional[str] = None
    company_logo_url: Optional[str] = None
    role: Optional[str] = None
    period: Optional[str] = None
    location: Optional[str] = None
    type: Optional[str] = None
    achievements: Optional[List[str]] = None
    sort_order: Optional[int] = None


class PatentIn(ContentModel):
    number: str
    title: str
    year: str
    company: str
    status: PatentStatus
    description: str = ""
    category: str = ""
    image_url: Optional[str] = None
    sort_order: int = 0


class PatentUpdate(ContentModel):
    entity = Patent

    number: Optional[str] = None
    title: Optional[str] = None
    year: Optional[str] = None
    company: Optional[str] = None
    status: Optional[PatentStatus] = None
    description: Optional[str] = None
    category: Optional[str] = None
    image_url: Optional[str] = None
    sort_order: Optional[int] = None


class ProjectIn(ContentModel):
    title: str
    company: str
    role: Optional[str] = None
    description: str
    impact: str = ""
    icon: IconKey
    color: str = ""
    technologies: List[str] = []
    image_url: Optional[str] = None
    featured: bool = False
    sort_order: int = 0


class ProjectUpdate(ContentModel):
    entity = Project

    title: Optional[str] = None
    company: Optional[str] = None
    role: Optional[str] = None
    description: Optional[str] = None
    impact: Optional[str] = None
    icon: Optional[IconKey] = None
    color: Optional[str] = None
    technologies: Optional[List[str]] = None
    image_url: Optional[str] = None
    featured: Optional[bool] = None
    sort_order: Optional[int] = None


class CompanyIn(ContentModel):
    name: str
    logo_url: Optional[str] = None
    sort_order: int = 0


class CompanyUpdate(ContentModel):
    entity = Company

    name: Optional[str] = None
    logo_url: Optional[str] = None
    sort_order: Optional[int] = None


# -- Publishing ------------------------------------------------------------
class TestimonialIn(ContentModel):
    author: str
    role: Optional[str] = None
    company: Optional[str] = None
    quote: str
    avatar_url: Optional[str] = None
    sort_order: int = 0


class TestimonialUpdate(ContentModel):
    entity = Testimonial

    author: Optional[str] = None
    role: Optional[str] = None
    company: Optional[str] = None
    quote: Optional[str] = None
    avatar_url: Optional[str] = None
    sort_order: Optional[int] = None


class MediaAssetIn(ContentModel):
    url: str
    caption: Optional[str] = None
    kind: str = "image"
    sort_order: int = 0


class MediaAssetUpdate(ContentModel):
    entity = MediaAsset

    url: Optional[str] = None
    caption: Optional[str] = None
    kind: Optional[str] = None
    sort_order: Optional[int] = None


class BlogPostIn(ContentModel):
    title: str = Field(..., min_length=1)
    slug: Optional[str] = None
    content: str
    excerpt: Optional[str] = None
    status: BlogStatus = "draft"
    published_at: Optional[datetime] = None


class BlogPostUpdate(ContentModel):
    entity = BlogPost

    title: Optional[str] = Field(None, min_length=1)
    slug: Optional[str] = Field(None, min_length=1)
    content: Optional[str] = None
    excerpt: Optional[str] = None
    status: Optional[BlogStatus] = None
    published_at: Optional[datetime] = None


# -- Chat content ----------------------------------------------------------
class ChatPromptIn(ContentModel):
    prompt: str = Field(..., min_length=1)
    sort_order: int = 0


class ChatPromptUpdate(ContentModel):
    entity = ChatPrompt

    prompt: Optional[str] = Field(None, min_length=1)
    sort_order: Optional[int] = None


class ChatContextDocIn(ContentModel):
    label: str = Field(..., min_length=1)
    body: str = Field(..., min_length=1)
    source: Optional[str] = None
    sort_order: int = 0


class ChatContextDocUpdate(ContentModel):
    entity = ChatContextDoc

    label: Optional[str] = Field(None, min_length=1)
    body: Optional[str] = Field(None, min_length=1)
    source: Optional[str] = None
    sort_order: Optional[int] = None


# -- Chat ------------------------------------------------------------------
class NewChatMessage(BaseModel):
    """A visitor's chat message."""

    content: str = Field(..., min_length=1, description="The visitor's question.", examples=["What patents do you hold?"])

    @field_validator("content")
    @classmethod
    def reject_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("content must not be blank")
        return value


class TextToSpeechRequest(BaseModel):
    """Text to synthesise; omitted voice settings use the configured defaults."""

    text: str = Field(..., min_length=1)
    voice_id: Optional[str] = None
    stability: Optional[float] = Field(None, ge=0, le=1)
    similarity_boost: Optional[float] = Field(None, ge=0, le=1)
    style: Optional[float] = Field(None, ge=0, le=1)
    use_speaker_boost: Optional[bool] = None


class AdminCredentials(BaseModel):
    password: str
    """The plaintext admin password."""
