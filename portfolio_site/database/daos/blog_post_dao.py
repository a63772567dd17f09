"""
Blog Post DAO

Adds slug and status queries to the generic content DAO. Posts are not
ordered by `sort_order`; listings are newest first (`published_at`, then
`created_at`).
"""

import logging
from typing import List, Optional

from sqlalchemy import desc, select
from sqlalchemy.orm import Session

from portfolio_site.database.daos.content_dao import ContentDao
from portfolio_site.database.entities.publishing import BLOG_STATUS_PUBLISHED, BlogPost

logger = logging.getLogger(__name__)


class BlogPostDao(ContentDao[BlogPost]):
    """DAO for `BlogPost`."""

    def __init__(self):
        super().__init__(BlogPost)

    def fetchAll(self, session: Session) -> List[BlogPost]:
        """Return every post (drafts included), newest first."""
        try:
            statement = select(BlogPost).order_by(desc(BlogPost.created_at))
            return list(session.scalars(statement).all())
        except Exception as e:
            logger.error("Error in BlogPostDao.fetchAll. Error Message: %s", e)
            raise e

    def fetchPublished(self, session: Session) -> List[BlogPost]:
        """Return published posts, most recently published first."""
        try:
            statement = (
                select(BlogPost)
                .filter(BlogPost.status == BLOG_STATUS_PUBLISHED)
                .order_by(desc(BlogPost.published_at), desc(BlogPost.created_at))
            )
            return list(session.scalars(statement).all())
        except Exception as e:
            logger.error("Error in BlogPostDao.fetchPublished. Error Message: %s", e)
            raise e

    def fetchBySlug(self, session: Session, slug: str) -> Optional[BlogPost]:
        try:
            return session.scalars(select(BlogPost).filter(BlogPost.slug == slug).limit(1)).first()
        except Exception as e:
            logger.error("Error in BlogPostDao.fetchBySlug (slug=%s). Error Message: %s", slug, e)
            raise e
