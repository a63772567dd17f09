"""
FastAPI Router — Public content • Admin auth • Admin CRUD
=========================================================

Purpose
-------
Defines the HTTP API for:
- Public reads: profile, skills, experiences, patents, projects, companies,
  testimonials, media assets and published blog posts
- Admin authentication: login, logout, session check (HttpOnly `token`
  cookie holding a JWT)
- Admin writes: create / patch / delete for every content resource, plus
  the chat prompts and chat context documents that ground the assistant

Key Notes
---------
- Input validation via Pydantic models in `portfolio_site.api.models`;
  unknown icons, unknown fields and bad ids are rejected with 422.
- Handlers are plain ``def`` functions: FastAPI runs them in its threadpool,
  so the synchronous `ContentStore` never blocks the event loop.
- Store errors (`RecordNotFound`, `StoreReadError`, ...) propagate to the
  application-level `PortfolioError` handler registered in `main`.
- Concurrent admin edits are last-write-wins.
"""

import logging
from typing import Optional, Type
from uuid import UUID

from fastapi import APIRouter, Cookie, Depends, HTTPException, Response

from portfolio_site.api.dependencies import get_context, require_admin
from portfolio_site.api.models import (
    AdminCredentials,
    BlogPostIn,
    BlogPostUpdate,
    ChatContextDocIn,
    ChatContextDocUpdate,
    ChatPromptIn,
    ChatPromptUpdate,
    CompanyIn,
    CompanyUpdate,
    ContentModel,
    ExperienceIn,
    ExperienceUpdate,
    MediaAssetIn,
    MediaAssetUpdate,
    PatentIn,
    PatentUpdate,
    ProfileIn,
    ProfileUpdate,
    ProjectIn,
    ProjectUpdate,
    SkillIn,
    SkillUpdate,
    TestimonialIn,
    TestimonialUpdate,
)
from portfolio_site.api.utils import ADMIN_SUBJECT, TOKEN_COOKIE, create_access_token, verify_token
from portfolio_site.app_context import AppContext
from portfolio_site.crypt.encrypt_decrypt import EncryptionDec

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api")
"""Router for public content reads and admin endpoints."""


# ----------------------------------------------------------------------
# Admin authentication
# ----------------------------------------------------------------------
@router.post("/admin/login")
def login(data: AdminCredentials, response: Response, context: AppContext = Depends(get_context)):
    """Check the admin password and set a signed JWT cookie.

    Response:
        200: {'authenticated': True}
        401: HTTPException on a wrong password
    """
    if not EncryptionDec().check_passwords(data.password, context.admin_password_hash):
        logger.warning("Failed admin login attempt")
        raise HTTPException(status_code=401, detail="Invalid password")
    settings = context.settings
    access_token = create_access_token({"sub": ADMIN_SUBJECT}, settings)
    response.set_cookie(
        key=TOKEN_COOKIE,
        value=access_token,
        httponly=True,
        secure=settings.COOKIE_SECURE,
        samesite="lax",
        max_age=settings.ACCESS_TOKEN_EXPIRE_MINUTES * 60,
    )
    logger.info("Admin logged in")
    return {"authenticated": True}


@router.post("/admin/logout")
def logout(response: Response):
    """Clear the admin cookie."""
    response.delete_cookie(key=TOKEN_COOKIE)
    return {"authenticated": False}


@router.get("/admin/check")
def check(token: Optional[str] = Cookie(None), context: AppContext = Depends(get_context)):
    return {"authenticated": verify_token(token, context.settings) == ADMIN_SUBJECT}


# ----------------------------------------------------------------------
# Profile
# ----------------------------------------------------------------------
@router.get("/profile")
def get_profile(context: AppContext = Depends(get_context)):
    """The site owner's profile, or null before one has been created."""
    return context.store.get_profile()


@router.post("/profile", status_code=201, dependencies=[Depends(require_admin)])
def create_profile(data: ProfileIn, context: AppContext = Depends(get_context)):
    return context.store.create_profile(data.changes())


@router.patch("/profile/{profile_id}", dependencies=[Depends(require_admin)])
def update_profile(profile_id: UUID, data: ProfileUpdate, context: AppContext = Depends(get_context)):
    return context.store.update_profile(profile_id, data.changes())


# ----------------------------------------------------------------------
# Blog
# ----------------------------------------------------------------------
@router.get("/blog-posts")
def list_blog_posts(context: AppContext = Depends(get_context)):
    """Published posts, newest first."""
    return context.store.list_published_posts()


@router.get("/blog-posts/all", dependencies=[Depends(require_admin)])
def list_all_blog_posts(context: AppContext = Depends(get_context)):
    """Every post, drafts included (admin)."""
    return context.store.list_all_posts()


@router.get("/blog-posts/{slug}")
def get_blog_post(slug: str, context: AppContext = Depends(get_context)):
    return context.store.get_published_post(slug)


@router.post("/blog-posts", status_code=201, dependencies=[Depends(require_admin)])
def create_blog_post(data: BlogPostIn, context: AppContext = Depends(get_context)):
    return context.store.create_post(data.changes())


@router.patch("/blog-posts/{post_id}", dependencies=[Depends(require_admin)])
def update_blog_post(post_id: UUID, data: BlogPostUpdate, context: AppContext = Depends(get_context)):
    return context.store.update_post(post_id, data.changes())


@router.delete("/blog-posts/{post_id}", status_code=204, dependencies=[Depends(require_admin)])
def delete_blog_post(post_id: UUID, context: AppContext = Depends(get_context)):
    context.store.delete_post(post_id)
    return Response(status_code=204)


# ----------------------------------------------------------------------
# Ordered resources
# ----------------------------------------------------------------------
def register_resource(
    resource: str,
    path: str,
    create_model: Type[ContentModel],
    update_model: Type[ContentModel],
    admin_path: Optional[str] = None,
    list_access: Optional[str] = "public",
) -> None:
    """
    Add list / create / patch / delete routes for one `ContentStore` resource.

    Parameters
    ----------
    resource : str
        Key of `portfolio_site.database.core.content_store.RESOURCES`.
    path : str
        Public path (e.g. ``/skills``); writes go here too unless
        `admin_path` is given.
    create_model, update_model : type
        Pydantic bodies for POST and PATCH.
    admin_path : str, optional
        Separate prefix for writes (and for an admin-only list).
    list_access : str, optional
        ``"public"`` serves an unauthenticated list at `path`, ``"admin"``
        a guarded list at the write path, None no list route.
    """
    write_path = admin_path or path
    name = resource

    if list_access == "public":
        @router.get(path, name=f"list_{name}")
        def list_records(context: AppContext = Depends(get_context)):
            return context.store.list_records(resource)
    elif list_access == "admin":
        @router.get(write_path, name=f"admin_list_{name}", dependencies=[Depends(require_admin)])
        def list_records_admin(context: AppContext = Depends(get_context)):
            return context.store.list_records(resource)

    @router.post(write_path, status_code=201, name=f"create_{name}", dependencies=[Depends(require_admin)])
    def create_record(data: create_model, context: AppContext = Depends(get_context)):
        return context.store.create_record(resource, data.changes())

    @router.patch(write_path + "/{record_id}", name=f"update_{name}", dependencies=[Depends(require_admin)])
    def update_record(record_id: UUID, data: update_model, context: AppContext = Depends(get_context)):
        return context.store.update_record(resource, record_id, data.changes())

    @router.delete(write_path + "/{record_id}", status_code=204, name=f"delete_{name}", dependencies=[Depends(require_admin)])
    def delete_record(record_id: UUID, context: AppContext = Depends(get_context)):
        context.store.delete_record(resource, record_id)
        return Response(status_code=204)


@router.get("/projects")
def list_projects(featured: Optional[bool] = None, context: AppContext = Depends(get_context)):
    """All projects, or only featured ones with ``?featured=true``."""
    projects = context.store.list_records("projects")
    if featured is not None:
        projects = [p for p in projects if p["featured"] == featured]
    return projects


register_resource("skills", "/skills", SkillIn, SkillUpdate)
register_resource("experiences", "/experiences", ExperienceIn, ExperienceUpdate)
register_resource("patents", "/patents", PatentIn, PatentUpdate)
register_resource("projects", "/projects", ProjectIn, ProjectUpdate, list_access=None)
register_resource("companies", "/companies", CompanyIn, CompanyUpdate)
register_resource("testimonials", "/consulting/testimonials", TestimonialIn, TestimonialUpdate)
register_resource("media_assets", "/media-assets", MediaAssetIn, MediaAssetUpdate, admin_path="/admin/media-assets")
register_resource("chat_prompts", "/admin/chat/prompts", ChatPromptIn, ChatPromptUpdate, list_access="admin")
register_resource(
    "chat_context_docs", "/admin/chat/context-docs", ChatContextDocIn, ChatContextDocUpdate, list_access="admin"
)
