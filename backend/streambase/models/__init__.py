"""ORM Models: table declarations for users and videos.

Invariants:
    - All models inherit from Base (db/base.py)
    - Models declare schema only; handlers query through the statement executor

Design Decisions:
    - All models imported here so Base.metadata is complete before create_all or autogenerate
"""

from streambase.models.user import User  # noqa: F401
from streambase.models.video import Video  # noqa: F401
