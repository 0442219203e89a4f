"""Services Layer: one resource handler per table.

Invariants:
    - Handlers depend on the StatementExecutor protocol, never on a session or engine
    - Handlers are constructed per request by api/dependencies.py
"""
