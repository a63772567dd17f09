"""
The `database` package is responsible for all interactions with the application's database.
It provides configuration, entity definitions, CRUD operations, and utility functions
that ensure smooth integration between the application and its data layer.

Contents:
    - config:
        Settings and the `Database` bootstrap (engine, session factory, metadata).

    - entities:
        SQLAlchemy entity models representing the database tables and schemas.

    - daos:
        Data Access Objects (DAOs) providing CRUD operations for the entities.

    - core:
        The `ContentStore` used by the API and chat layers, plus demo seeding.

    - helpers:
        Utility helpers to manage database transactions and sessions.
"""
