"""Statement Executor: runs one positional-parameter SQL statement per call.

Invariants:
    - Values are always bound through SQLAlchemy text() parameters, never interpolated
    - Placeholders are $1..$n and must match the number of params exactly
    - Each call commits on success; on failure it rolls back and raises DatabaseError
    - Returned rows are plain dicts (empty list for statements without rows)
"""

import logging
import re
from collections.abc import Sequence

from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from streambase.core.domain_types import Row
from streambase.infrastructure.database import to_database_error

logger = logging.getLogger(__name__)

_PLACEHOLDER = re.compile(r"\$(\d+)")


def bind_positional(
    statement: str, params: Sequence[object],
) -> tuple[str, dict[str, object]]:
    """Rewrite $n placeholders to named binds and pair them with params."""
    indexes = {int(m) for m in _PLACEHOLDER.findall(statement)}
    if indexes != set(range(1, len(params) + 1)):
        raise ValueError(
            f"Statement expects placeholders {sorted(indexes)} "
            f"but {len(params)} parameter(s) were given",
        )
    named = _PLACEHOLDER.sub(lambda m: f":p{m.group(1)}", statement)
    binds = {f"p{i}": value for i, value in enumerate(params, start=1)}
    return named, binds


class SqlExecutor:
    """StatementExecutor backed by an AsyncSession."""

    def __init__(self, session: AsyncSession):
        self._session = session

    async def execute(
        self, statement: str, params: Sequence[object] = (),
    ) -> list[Row]:
        named, binds = bind_positional(statement, params)
        try:
            result = await self._session.execute(text(named), binds)
            rows = (
                [dict(row) for row in result.mappings().all()]
                if result.returns_rows else []
            )
            await self._session.commit()
        except SQLAlchemyError as e:
            await self._session.rollback()
            raise to_database_error(e, "query") from e
        logger.debug(f"Executed statement returning {len(rows)} row(s)")
        return rows
