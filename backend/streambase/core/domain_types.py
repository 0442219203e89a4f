"""Domain Types: identity wrappers and the row shape returned by the executor.

Invariants:
    - Identifiers are integers assigned by the storage layer, never by the API
    - A Row is a plain dict keyed by column name
"""

from typing import Any, NewType

UserId = NewType("UserId", int)
VideoId = NewType("VideoId", int)

Row = dict[str, Any]

# Largest value an Integer column holds on PostgreSQL (int4)
MAX_INT_COLUMN = 2_147_483_647
