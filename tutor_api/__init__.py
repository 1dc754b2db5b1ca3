"""
Tutor API — Application Package Initializer
============================================

What: Marks the `tutor_api` directory as a Python package.
Why:  Enables module imports like `from tutor_api.config import settings`.
Who:  Used implicitly by Python's import system and explicitly by Alembic, pytest, and uvicorn.

Architecture Note:
    The service is a thin CRUD layer over one table:

    ┌─────────────────────────────────────┐
    │       Routes (Request Handler)      │  ← guard checks, status codes, headers
    ├─────────────────────────────────────┤
    │   Repositories (Persistence Gateway)│  ← save / find / delete for one entity
    ├─────────────────────────────────────┤
    │       Models & Schemas (Data)       │  ← SQLAlchemy ORM + Pydantic
    ├─────────────────────────────────────┤
    │        Database (Persistence)       │  ← Async sessions, one unit of work per request
    └─────────────────────────────────────┘

    Routes never build SQL; repositories never see HTTP.
"""

__version__ = "1.0.0"
