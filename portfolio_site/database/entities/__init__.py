"""
Entities Package — SQLAlchemy 2.0 ORM Models (UUID + UTC)
=========================================================

The `entities` package defines the ORM models of the application, mapping
database tables to Python classes using SQLAlchemy 2.0-typed mappings.
These classes form the persistence backbone and are consumed by DAOs
(`daos` package) to perform CRUD and transactional operations.

Tech Stack & Conventions
------------------------
- PostgreSQL in production, SQLite for tests (portable `Uuid` / `JSON` types)
- Timezone-aware timestamps (UTC)
- SQLAlchemy 2.0 style `Mapped[...]` + `mapped_column(...)`
- `sort_order` on every list entity, used for display only

Contents
--------
- Profile          — singleton owner profile
- Skill, Experience, Patent, Project, Company — portfolio sections
- BlogPost, Testimonial, MediaAsset           — blog, consulting page, media
- ChatPrompt, ChatContextDoc                  — chat assistant inputs
- ChatConversation, ChatMessage               — chat history
"""

from portfolio_site.database.entities.chat_content import ChatContextDoc, ChatPrompt
from portfolio_site.database.entities.conversations import ChatConversation
from portfolio_site.database.entities.messages import ROLE_ASSISTANT, ROLE_USER, ChatMessage
from portfolio_site.database.entities.portfolio import Company, Experience, Patent, Project, Skill
from portfolio_site.database.entities.profile import Profile
from portfolio_site.database.entities.publishing import BlogPost, MediaAsset, Testimonial

__all__ = [
    "BlogPost",
    "ChatContextDoc",
    "ChatConversation",
    "ChatMessage",
    "ChatPrompt",
    "Company",
    "Experience",
    "MediaAsset",
    "Patent",
    "Profile",
    "Project",
    "ROLE_ASSISTANT",
    "ROLE_USER",
    "Skill",
    "Testimonial",
]
