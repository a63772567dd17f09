"""
Backend for a personal portfolio site with an AI "ask me about my work" chat.

Packages
--------
- database
    Settings, SQLAlchemy entities, DAOs and the `ContentStore` facade.
- chat
    Grounding context builder, conversation service and the OpenAI /
    ElevenLabs gateways.
- api
    FastAPI routers for public content, admin CRUD and chat.
- crypt
    Password hashing helpers used by admin login.
"""

__version__ = "0.1.0"
