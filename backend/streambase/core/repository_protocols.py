"""Boundary Protocols: contracts between resource handlers and storage.

Invariants:
    - Handlers never import SQLAlchemy; storage is reached only through StatementExecutor
    - Statement templates use positional placeholders ($1, $2, ...); values are always bound
    - Implementations provided by infrastructure via dependency injection

Design Decisions:
    - Protocol over ABC: structural subtyping lets tests pass plain fakes
"""

from collections.abc import Sequence
from typing import Protocol

from streambase.core.domain_types import Row


class StatementExecutor(Protocol):
    """Runs one parameterized statement and returns the matched rows."""
    async def execute(
        self, statement: str, params: Sequence[object] = (),
    ) -> list[Row]: ...
