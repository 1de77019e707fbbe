"""
BirdAPI: Application Package Initializer
=========================================

What: Marks the `birdapi` directory as a Python package.
Why:  Enables imports like `from birdapi.config import settings`.

Architecture Note:
    The service is layered the same way top to bottom:

    ┌─────────────────────────────────────┐
    │           Routes (API Layer)        │  ← HTTP concerns only
    ├─────────────────────────────────────┤
    │        Stores (Persistence API)     │  ← in-memory or relational
    ├─────────────────────────────────────┤
    │       Models & Schemas (Data)       │  ← SQLAlchemy ORM + Pydantic
    ├─────────────────────────────────────┤
    │        Database (Engine setup)      │  ← Async SQLAlchemy engine
    └─────────────────────────────────────┘

    Routes never touch storage directly. They receive a BirdStore through
    FastAPI's dependency injection, so either variant can be swapped in
    without changing a handler.
"""

__version__ = "1.0.0"
