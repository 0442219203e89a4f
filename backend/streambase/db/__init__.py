"""Database Infrastructure: SQLAlchemy declarative Base shared by all models.

Invariants:
    - Single async engine per process (initialized via init_db)
    - Table metadata lives on Base; alembic and test fixtures read it from there
"""
