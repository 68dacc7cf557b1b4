"""
Top-level API router.

Aggregates the domain routers mounted under ``/api``.  The static
front-end router is not part of this: it is installed on the
application itself by ``create_app`` when static serving is enabled.
"""

from fastapi import APIRouter

from .endpoints import users

router = APIRouter()

router.include_router(users.router, prefix="/users", tags=["users"])
