"""
BirdAPI: FastAPI Dependencies
==============================

What:  Functions injected into route handlers via Depends().
Why:   Handlers receive the store explicitly instead of reaching for a
       module-level variable, and tests swap it by building the app with
       a different store.
"""

from fastapi import Request

from birdapi.config import Settings
from birdapi.stores import BirdStore


def get_store(request: Request) -> BirdStore:
    """The store create_app() attached to the running application."""
    return request.app.state.store


def get_settings(request: Request) -> Settings:
    """The settings the running application was built with."""
    return request.app.state.settings
