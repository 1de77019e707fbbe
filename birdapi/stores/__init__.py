"""
BirdAPI: Stores Package
========================

What:  Persistence for bird records behind one interface.

Store Inventory:
    - BirdStore (abstract): create_bird() / get_birds() contract
    - InMemoryBirdStore:    lock-guarded list, lives as long as the process
    - SqlBirdStore:         `birds` table through async SQLAlchemy

Routes only ever call create_bird() and get_birds(), so the variant is
picked once at startup by build_store() and nothing else changes.
"""

from birdapi.config import Settings
from birdapi.stores.base import BirdStore
from birdapi.stores.memory import InMemoryBirdStore
from birdapi.stores.sql import SqlBirdStore


def build_store(settings: Settings) -> BirdStore:
    """Construct the store variant selected by STORE_BACKEND."""
    if settings.store_backend == "sql":
        return SqlBirdStore.from_settings(settings)
    return InMemoryBirdStore()


__all__ = [
    "BirdStore",
    "InMemoryBirdStore",
    "SqlBirdStore",
    "build_store",
]
