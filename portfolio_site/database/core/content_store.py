"""
Store-layer operations for site content and chat history.

All public methods are wrapped with the `@transactional` decorator, which
manages SQLAlchemy sessions and transactions automatically. Each method
accepts (and uses) an injected `session: Session` provided by the decorator.

The store composes DAOs and returns plain dicts (one key per column), so
callers never hold ORM objects across transaction boundaries.

Failure semantics
-----------------
- Driver errors surface as `StoreReadError` (reads) or `StoreWriteError`
  (writes); see `helpers.transactionManagement`.
- Unknown ids surface as `RecordNotFound` / `ConversationNotFound`.
"""

import logging
import re
import unicodedata
from datetime import datetime, timezone
from typing import Dict, List, Optional
from uuid import UUID

from sqlalchemy.orm import Session

from portfolio_site.database.config.connection_engine import Database
from portfolio_site.database.daos.blog_post_dao import BlogPostDao
from portfolio_site.database.daos.chat_message_dao import ChatMessagesDao
from portfolio_site.database.daos.content_dao import ContentDao
from portfolio_site.database.daos.conversation_dao import ConversationDao
from portfolio_site.database.daos.profile_dao import ProfileDao
from portfolio_site.database.entities import (
    ChatContextDoc,
    ChatPrompt,
    Company,
    Experience,
    MediaAsset,
    Patent,
    Project,
    Skill,
    Testimonial,
)
from portfolio_site.database.entities.publishing import BLOG_STATUS_PUBLISHED
from portfolio_site.database.helpers.transactionManagement import transactional
from portfolio_site.errors import ConversationNotFound, RecordNotFound

logger = logging.getLogger(__name__)

RESOURCES = {
    "skills": Skill,
    "experiences": Experience,
    "patents": Patent,
    "projects": Project,
    "companies": Company,
    "testimonials": Testimonial,
    "media_assets": MediaAsset,
    "chat_prompts": ChatPrompt,
    "chat_context_docs": ChatContextDoc,
}
"""Ordered list resources served by the generic CRUD methods."""


def slugify(text: str) -> str:
    """
    Turn a title into a URL slug.

    >>> slugify("Hello, Wörld! 2024")
    'hello-world-2024'
    """
    normalized = unicodedata.normalize("NFKD", text).encode("ascii", "ignore").decode("ascii")
    slug = re.sub(r"[^a-z0-9]+", "-", normalized.lower()).strip("-")
    return slug or "post"


class ContentStore:
    """
    Repository facade over the relational content store.

    Parameters
    ----------
    database : Database
        Engine + session factory used by `@transactional`.
    """

    def __init__(self, database: Database):
        self.database = database
        self.profile_dao = ProfileDao()
        self.blog_post_dao = BlogPostDao()
        self.conversation_dao = ConversationDao()
        self.message_dao = ChatMessagesDao()
        self.daos: Dict[str, ContentDao] = {name: ContentDao(entity) for name, entity in RESOURCES.items()}

    def _dao(self, resource: str) -> ContentDao:
        try:
            return self.daos[resource]
        except KeyError:
            raise ValueError(f"Unknown content resource {resource!r}") from None

    @staticmethod
    def _entity_label(resource: str) -> str:
        return RESOURCES[resource].__name__

    # ------------------------------------------------------------------
    # Generic ordered resources
    # ------------------------------------------------------------------
    @transactional(read_only=True)
    def list_records(self, resource: str, session: Session = None) -> List[dict]:
        """
        List every row of a resource, ordered by `sort_order`.

        Parameters
        ----------
        resource : str
            One of the keys of `RESOURCES`.
        session : Session
            Active SQLAlchemy session (injected by @transactional).
        """
        return [record.to_dict() for record in self._dao(resource).fetchAll(session)]

    @transactional(read_only=True)
    def get_record(self, resource: str, record_id: UUID, session: Session = None) -> dict:
        record = self._dao(resource).fetchById(session, record_id)
        if record is None:
            raise RecordNotFound(self._entity_label(resource), record_id)
        return record.to_dict()

    @transactional
    def create_record(self, resource: str, fields: dict, session: Session = None) -> dict:
        """
        Insert a row for `resource` and return it.

        Returns
        -------
        dict
            The created row, including generated `id`.
        """
        record = self._dao(resource).createRecord(session, fields)
        logger.info("Created %s %s", self._entity_label(resource), record.id)
        return record.to_dict()

    @transactional
    def update_record(self, resource: str, record_id: UUID, changes: dict, session: Session = None) -> dict:
        """
        Partially update a row. Last write wins; there is no version check.

        Raises
        ------
        RecordNotFound
            If no row has `record_id`.
        """
        record = self._dao(resource).updateRecord(session, record_id, changes)
        if record is None:
            raise RecordNotFound(self._entity_label(resource), record_id)
        return record.to_dict()

    @transactional
    def delete_record(self, resource: str, record_id: UUID, session: Session = None) -> None:
        if not self._dao(resource).deleteRecord(session, record_id):
            raise RecordNotFound(self._entity_label(resource), record_id)
        logger.info("Deleted %s %s", self._entity_label(resource), record_id)

    # ------------------------------------------------------------------
    # Profile
    # ------------------------------------------------------------------
    @transactional(read_only=True)
    def get_profile(self, session: Session = None) -> Optional[dict]:
        """Return the profile row, or None before it has been created."""
        profile = self.profile_dao.fetchProfile(session)
        return profile.to_dict() if profile else None

    @transactional
    def create_profile(self, fields: dict, session: Session = None) -> dict:
        return self.profile_dao.createRecord(session, fields).to_dict()

    @transactional
    def update_profile(self, profile_id: UUID, changes: dict, session: Session = None) -> dict:
        profile = self.profile_dao.updateRecord(session, profile_id, changes)
        if profile is None:
            raise RecordNotFound("Profile", profile_id)
        return profile.to_dict()

    # ------------------------------------------------------------------
    # Blog
    # ------------------------------------------------------------------
    @transactional(read_only=True)
    def list_published_posts(self, session: Session = None) -> List[dict]:
        return [post.to_dict() for post in self.blog_post_dao.fetchPublished(session)]

    @transactional(read_only=True)
    def list_all_posts(self, session: Session = None) -> List[dict]:
        return [post.to_dict() for post in self.blog_post_dao.fetchAll(session)]

    @transactional(read_only=True)
    def get_published_post(self, slug: str, session: Session = None) -> dict:
        post = self.blog_post_dao.fetchBySlug(session, slug)
        if post is None or post.status != BLOG_STATUS_PUBLISHED:
            raise RecordNotFound("BlogPost", slug)
        return post.to_dict()

    def _unique_slug(self, session: Session, wanted: str, post_id: Optional[UUID] = None) -> str:
        base = slugify(wanted)
        slug, suffix = base, 2
        while True:
            existing = self.blog_post_dao.fetchBySlug(session, slug)
            if existing is None or existing.id == post_id:
                return slug
            slug = f"{base}-{suffix}"
            suffix += 1

    @staticmethod
    def _stamp_publication(fields: dict, current_published_at=None) -> dict:
        if fields.get("status") == BLOG_STATUS_PUBLISHED and not fields.get("published_at") and current_published_at is None:
            fields["published_at"] = datetime.now(timezone.utc)
        return fields

    @transactional
    def create_post(self, fields: dict, session: Session = None) -> dict:
        """
        Create a blog post.

        The slug is derived from `title` when not given and de-duplicated
        with a numeric suffix. Publishing without `published_at` stamps the
        current time.
        """
        fields = dict(fields)
        fields["slug"] = self._unique_slug(session, fields.get("slug") or fields["title"])
        self._stamp_publication(fields)
        return self.blog_post_dao.createRecord(session, fields).to_dict()

    @transactional
    def update_post(self, post_id: UUID, changes: dict, session: Session = None) -> dict:
        post = self.blog_post_dao.fetchById(session, post_id)
        if post is None:
            raise RecordNotFound("BlogPost", post_id)
        changes = dict(changes)
        if "slug" in changes:
            changes["slug"] = self._unique_slug(session, changes["slug"] or post.title, post_id=post_id)
        self._stamp_publication(changes, post.published_at)
        return self.blog_post_dao.updateRecord(session, post_id, changes).to_dict()

    @transactional
    def delete_post(self, post_id: UUID, session: Session = None) -> None:
        if not self.blog_post_dao.deleteRecord(session, post_id):
            raise RecordNotFound("BlogPost", post_id)

    # ------------------------------------------------------------------
    # Chat grounding
    # ------------------------------------------------------------------
    @transactional(read_only=True)
    def read_context_snapshot(self, session: Session = None) -> dict:
        """
        Read everything the chat context builder needs in one transaction.

        Returns
        -------
        dict
            Keys: profile (dict | None), experiences, patents, projects,
            skills, context_docs (lists of dicts, `sort_order` ascending).
        """
        profile = self.profile_dao.fetchProfile(session)
        return {
            "profile": profile.to_dict() if profile else None,
            "experiences": [r.to_dict() for r in self.daos["experiences"].fetchAll(session)],
            "patents": [r.to_dict() for r in self.daos["patents"].fetchAll(session)],
            "projects": [r.to_dict() for r in self.daos["projects"].fetchAll(session)],
            "skills": [r.to_dict() for r in self.daos["skills"].fetchAll(session)],
            "context_docs": [r.to_dict() for r in self.daos["chat_context_docs"].fetchAll(session)],
        }

    # ------------------------------------------------------------------
    # Chat history
    # ------------------------------------------------------------------
    @transactional
    def create_conversation(self, session: Session = None) -> dict:
        conversation = self.conversation_dao.createConversation(session)
        logger.info("Started conversation %s", conversation.id)
        return conversation.to_dict()

    @transactional(read_only=True)
    def get_conversation(self, conversation_id: UUID, session: Session = None) -> Optional[dict]:
        """Return the conversation row, or None if the id is unknown."""
        conversation = self.conversation_dao.fetchConversationById(session, conversation_id)
        return conversation.to_dict() if conversation else None

    @transactional
    def add_message(self, conversation_id: UUID, role: str, content: str, session: Session = None) -> dict:
        """
        Append a message to an existing conversation.

        Raises
        ------
        ConversationNotFound
            If the conversation does not exist; nothing is written.
        """
        if self.conversation_dao.fetchConversationById(session, conversation_id) is None:
            raise ConversationNotFound(conversation_id)
        return self.message_dao.createMessage(session, conversation_id, role, content).to_dict()

    @transactional(read_only=True)
    def list_messages(self, conversation_id: UUID, session: Session = None) -> List[dict]:
        """Messages of a conversation in creation order (empty if none)."""
        return [m.to_dict() for m in self.message_dao.fetchMessagesByConversationId(session, conversation_id)]

    @transactional(read_only=True)
    def get_last_message(self, conversation_id: UUID, session: Session = None) -> Optional[dict]:
        message = self.message_dao.fetchLastMessage(session, conversation_id)
        return message.to_dict() if message else None

    # ------------------------------------------------------------------
    # Seeding
    # ------------------------------------------------------------------
    @transactional(read_only=True)
    def has_profile(self, session: Session = None) -> bool:
        return self.profile_dao.fetchProfile(session) is not None
