"""
Noteful API — Application Package Initializer
==============================================

What: Marks the `noteful_api` directory as a Python package.
Why:  Enables module imports like `from noteful_api.config import settings`.
Who:  Used implicitly by Python's import system and explicitly by Alembic, pytest, and uvicorn.

Architecture Note:
    The backend follows a layered architecture:

    ┌─────────────────────────────────────┐
    │      Routes (folders, notes)        │  ← HTTP contract, status codes
    ├─────────────────────────────────────┤
    │   Serializers (sanitize, dates)     │  ← Public representation
    ├─────────────────────────────────────┤
    │  Resource Services (per table)      │  ← list / get / insert / delete
    ├─────────────────────────────────────┤
    │     Models & Schemas (Data)         │  ← SQLAlchemy ORM + Pydantic
    ├─────────────────────────────────────┤
    │      Database (Persistence)         │  ← Async SQLAlchemy sessions
    └─────────────────────────────────────┘
"""

__version__ = "1.0.0"
