"""User Handler: create, list, read, update, and delete for the users table.

Invariants:
    - Every operation issues exactly one statement through the injected executor
    - An empty result for an id-scoped statement raises ResourceNotFoundError
    - Update never inserts; it replaces name and email of an existing row
    - Storage failures are not caught here (executor raises DatabaseError)
"""

import logging

from streambase.core.domain_types import Row, UserId
from streambase.core.errors import ResourceNotFoundError
from streambase.core.repository_protocols import StatementExecutor
from streambase.schemas.user import UserCreate, UserUpdate

logger = logging.getLogger(__name__)

INSERT_USER = "INSERT INTO users (name, email) VALUES ($1, $2) RETURNING *"
SELECT_USERS = "SELECT * FROM users ORDER BY id DESC"
SELECT_USER = "SELECT * FROM users WHERE id = $1"
UPDATE_USER = "UPDATE users SET name = $1, email = $2 WHERE id = $3 RETURNING *"
DELETE_USER = "DELETE FROM users WHERE id = $1 RETURNING *"


class UserService:
    """Resource handler for users, bound to one executor per request."""

    def __init__(self, executor: StatementExecutor):
        self._executor = executor

    async def create(self, body: UserCreate) -> Row:
        rows = await self._executor.execute(INSERT_USER, [body.name, body.email])
        user = rows[0]
        logger.info(
            "User created", extra={"resource": "user", "resource_id": user["id"]},
        )
        return user

    async def list_all(self) -> list[Row]:
        """All users, newest first."""
        return await self._executor.execute(SELECT_USERS)

    async def get(self, user_id: UserId) -> Row:
        rows = await self._executor.execute(SELECT_USER, [user_id])
        return _first_or_404(rows, user_id)

    async def update(self, user_id: UserId, body: UserUpdate) -> Row:
        rows = await self._executor.execute(
            UPDATE_USER, [body.name, body.email, user_id],
        )
        user = _first_or_404(rows, user_id)
        logger.info(
            "User updated", extra={"resource": "user", "resource_id": user_id},
        )
        return user

    async def delete(self, user_id: UserId) -> dict[str, str]:
        rows = await self._executor.execute(DELETE_USER, [user_id])
        _first_or_404(rows, user_id)
        logger.info(
            "User deleted", extra={"resource": "user", "resource_id": user_id},
        )
        return {"message": "User deleted successfully"}


def _first_or_404(rows: list[Row], user_id: UserId) -> Row:
    if not rows:
        logger.info(
            "User not found", extra={"resource": "user", "resource_id": user_id},
        )
        raise ResourceNotFoundError("User", str(user_id))
    return rows[0]
