"""
Profile DAO

Thin data-access layer for the singleton `Profile` row. The site expects one
profile; if several exist, the most recently updated one is returned.
"""

import logging
from typing import Optional

from sqlalchemy import select
from sqlalchemy.orm import Session

from portfolio_site.database.daos.content_dao import ContentDao
from portfolio_site.database.entities.profile import Profile

logger = logging.getLogger(__name__)


class ProfileDao(ContentDao[Profile]):
    """DAO for `Profile`, adding singleton lookup on top of the generic CRUD."""

    def __init__(self):
        super().__init__(Profile)

    def fetchProfile(self, session: Session) -> Optional[Profile]:
        """
        Fetch the profile row.

        Returns
        -------
        Profile | None
            The profile, or None if it has not been created yet.
        """
        try:
            return session.scalars(select(Profile).order_by(Profile.updated_at.desc()).limit(1)).first()
        except Exception as e:
            logger.error("Error in ProfileDao.fetchProfile. Error Message: %s", e)
            raise e
