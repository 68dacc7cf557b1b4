"""
Business logic for users.

``UserService`` sits between the HTTP handlers and the ``UserStore``.
Each call performs exactly one store operation.  Name validation is
optional and happens here, before the store is touched.

``sqlite3`` calls block, so every store operation runs in Starlette's
threadpool.  A slow or locked statement only holds up the request
waiting on it; the event loop keeps serving everything else.
"""

import logging
from typing import List

from fastapi import Depends, Request
from starlette.concurrency import run_in_threadpool

from ..core.db import UserStore, get_store
from ..core.exceptions import InvalidInputError
from ..schemas.user import UserCreate, UserRead

logger = logging.getLogger(__name__)


class UserService:
    """Create and list users backed by a ``UserStore``."""

    def __init__(self, store: UserStore, validate_names: bool = False) -> None:
        self.store = store
        self.validate_names = validate_names

    async def list_users(self) -> List[UserRead]:
        """Return every persisted user."""
        rows = await run_in_threadpool(self.store.list)
        return [UserRead(id=row["id"], name=row["name"]) for row in rows]

    async def create_user(self, data: UserCreate) -> UserRead:
        """Insert a user and return it with its newly assigned id.

        The submitted name is stored verbatim.  With ``validate_names``
        enabled, a missing or blank name raises ``InvalidInputError``
        instead of reaching the store.
        """
        if self.validate_names and (data.name is None or not data.name.strip()):
            raise InvalidInputError("name must be a non-empty string")
        user_id = await run_in_threadpool(self.store.insert, data.name)
        logger.info("Created user %s", user_id)
        return UserRead(id=user_id, name=data.name)


def get_user_service(request: Request, store: UserStore = Depends(get_store)) -> UserService:
    """FastAPI dependency building a service around the shared store."""
    return UserService(store, validate_names=request.app.state.settings.validate_names)
