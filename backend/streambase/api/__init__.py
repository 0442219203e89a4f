"""API Layer: FastAPI routes, dependency providers, and error handlers.

Invariants:
    - Routes registered explicitly in main.py (no auto-discovery)
    - Routes dispatch to a resource handler and return its result; no SQL here
"""
