"""FastAPI dependencies shared by the routers."""

from fastapi import Cookie, Depends, HTTPException, Request

from portfolio_site.api.utils import ADMIN_SUBJECT, verify_token
from portfolio_site.app_context import AppContext


def get_context(request: Request) -> AppContext:
    return request.app.state.context


def require_admin(token: str = Cookie(None), context: AppContext = Depends(get_context)) -> str:
    """
    Guard for admin routes.

    Raises 401 when the `token` cookie is missing, invalid or expired.
    """
    if not token:
        raise HTTPException(status_code=401, detail="Missing Token")
    subject = verify_token(token, context.settings)
    if subject != ADMIN_SUBJECT:
        raise HTTPException(status_code=401, detail="Invalid or expired token")
    return subject
