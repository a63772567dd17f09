"""
API Package — FastAPI routers • Models • JWT utils
==================================================

Contents
--------
- fast_api
    Public content reads, admin login/logout/check and admin CRUD for every
    content resource (profile, skills, experiences, patents, projects,
    companies, testimonials, media assets, blog posts, chat prompts and chat
    context documents).

- chat_api
    Chat assistant endpoints (conversations, messages, retry) and
    text-to-speech.

- models
    Pydantic request contracts. Icon fields use the closed `IconKey` set.

- dependencies
    `get_context` (the `AppContext` on ``app.state``) and the
    `require_admin` cookie guard.

- utils
    JWT helpers:
      • create_access_token(payload, settings) — issues signed JWTs with exp
      • verify_token(token, settings) — validates JWTs and extracts the subject

Operational Notes
-----------------
- Security: admin auth via HttpOnly `token` cookie (JWT). Never log secrets.
- Errors: clients only ever see `PortfolioError.public_message`; upstream
  detail stays in the server log.
"""
