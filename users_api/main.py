import logging
from typing import Optional
from fastapi import FastAPI
from .api.v1.endpoints.users import router as users_router
from .core.config import settings
from .db.client import get_users_table
from .db.repositories.users import UserRepository
from .db.store import DynamoRecordStore


def create_app(user_repository: Optional[UserRepository] = None) -> FastAPI:
    logging.getLogger("users_api").setLevel(settings.LOG_LEVEL)

    # The table client is built once per process and shared by every request
    if user_repository is None:
        user_repository = UserRepository(
            DynamoRecordStore(get_users_table()),
            update_requires_existing=settings.UPDATE_REQUIRES_EXISTING
        )

    app = FastAPI()
    app.state.user_repository = user_repository

    # Include routers
    app.include_router(users_router, tags=["users"])
    return app

app = create_app()
