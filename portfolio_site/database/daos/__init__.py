"""
DAOs Package — Data Access Layer (SQLAlchemy 2.0)
=================================================

The `daos` package provides the Data Access Layer for the application.
It encapsulates all interactions with SQLAlchemy ORM entities, providing
clean CRUD APIs for the store layer while hiding direct query details.

Conventions
-----------
- SQLAlchemy 2.0 typed mappings (Mapped[...] / mapped_column)
- Session lifecycle (open/commit/rollback) is handled by callers
- DAOs surface exceptions so upper layers decide error policy

Contents
--------
- ContentDao
    Generic repository bound to one ordered entity class:
    * createRecord / fetchAll / fetchById / updateRecord / deleteRecord

- ProfileDao
    ContentDao for the singleton profile plus `fetchProfile`.

- BlogPostDao
    ContentDao for blog posts plus `fetchPublished` and `fetchBySlug`.

- ConversationDao
    Creates and fetches chat conversations.

- ChatMessagesDao
    Appends messages (with per-conversation `position`) and fetches them in
    creation order.
"""
