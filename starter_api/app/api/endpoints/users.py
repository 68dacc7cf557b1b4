"""
User endpoints.

``GET /api/users`` lists all users and ``POST /api/users`` creates one.
There is no update, delete, pagination or filtering.
"""

from typing import List

from fastapi import APIRouter, Depends

from starter_api.app.schemas.user import UserCreate, UserRead
from starter_api.app.services.user_service import UserService, get_user_service

router = APIRouter()


@router.get("", response_model=List[UserRead])
@router.get("/", response_model=List[UserRead], include_in_schema=False)
async def list_users(service: UserService = Depends(get_user_service)) -> List[UserRead]:
    """Return all users."""
    return await service.list_users()


@router.post("", response_model=UserRead)
@router.post("/", response_model=UserRead, include_in_schema=False)
async def create_user(user: UserCreate, service: UserService = Depends(get_user_service)) -> UserRead:
    """Create a user and return its ``id`` and ``name``."""
    return await service.create_user(user)
