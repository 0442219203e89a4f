"""Infrastructure Layer: database pool, statement executor, and logging setup.

Invariants:
    - Infrastructure never imports from services/ or api/
    - Every SQLAlchemy failure leaves this layer as a DatabaseError
"""
