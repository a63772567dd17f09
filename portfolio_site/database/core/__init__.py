"""
The `core` package connects the API and chat layers with the database.

Contents
--------
- content_store
    `ContentStore`: transactional facade over the DAOs, returning plain dicts
    for profile, portfolio sections, blog posts, chat prompts/context docs and
    chat history.
- seed
    `seed_database`: demo content for an empty store.
"""
