"""
The `helpers` package provides utility functions and decorators
that support database operations and cross-cutting concerns.

Contents
--------
- transactionManagement
    Provides tools for database transaction management:
        - Context variable (`db_session_context`) for propagating the active session across calls without explicit passing
        - `@transactional` decorator for wrapping store methods in a managed transaction:
            - Reuses an existing session if one is active in context
            - Creates, commits, and closes a new session otherwise
            - Rolls back the session on errors
            - Translates driver errors into the store error taxonomy
"""
