"""Dependency Providers: build the per-request executor and resource handlers.

Invariants:
    - One AsyncSession, one SqlExecutor, one handler per request
    - Tests swap storage by overriding get_db or get_executor
"""

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from streambase.core.repository_protocols import StatementExecutor
from streambase.infrastructure.database import get_db
from streambase.infrastructure.executor import SqlExecutor
from streambase.services.user_service import UserService
from streambase.services.video_service import VideoService


async def get_executor(db: AsyncSession = Depends(get_db)) -> StatementExecutor:
    return SqlExecutor(db)


async def get_user_service(
    executor: StatementExecutor = Depends(get_executor),
) -> UserService:
    return UserService(executor)


async def get_video_service(
    executor: StatementExecutor = Depends(get_executor),
) -> VideoService:
    return VideoService(executor)
