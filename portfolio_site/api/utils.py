"""
JWT utilities for the admin session cookie.

Functions
---------
create_access_token(data: dict, settings: Settings) -> str
    Creates a signed JWT access token with an expiration (`exp`) claim.
verify_token(token: str, settings: Settings) -> str | None
    Verify a JWT's signature & expiration and return the subject (`sub`) if valid.

Environment contract (from `Settings`)
--------------------------------------
SECRET_KEY : str
    HMAC signing key for JWTs.
ALGORITHM : str
    JWT signing algorithm (e.g., "HS256").
ACCESS_TOKEN_EXPIRE_MINUTES : int
    Token lifetime window in minutes.
"""

import logging
from datetime import datetime
from typing import Optional

from jose import JWTError, jwt

from portfolio_site.database.config.config import Settings

logger = logging.getLogger(__name__)

ADMIN_SUBJECT = "admin"
TOKEN_COOKIE = "token"


def create_access_token(data: dict, settings: Settings) -> str:
    """
    Create a signed JWT access token.

    Parameters
    ----------
    data : dict
        Claims to embed in the token.
    settings : Settings
        Supplies the key, algorithm and lifetime.

    Returns
    -------
    str
        Encoded JWT string.
    """
    encoding = data.copy()
    # exp is a NumericDate (seconds since epoch)
    expires = int(datetime.now().timestamp()) + (int(settings.ACCESS_TOKEN_EXPIRE_MINUTES) * 60)
    encoding.update({"exp": expires})
    return jwt.encode(encoding, settings.SECRET_KEY, algorithm=settings.ALGORITHM)


def verify_token(token: Optional[str], settings: Settings) -> Optional[str]:
    """
    Verify a JWT and return its subject.

    Returns
    -------
    str | None
        The `sub` claim if the token is valid, otherwise None (missing,
        invalid signature, expired or malformed).
    """
    if not token:
        return None
    try:
        payload = jwt.decode(token, settings.SECRET_KEY, algorithms=[settings.ALGORITHM])
        return payload.get("sub")
    except JWTError as e:
        logger.info("Rejected admin token: %s", e)
        return None
