"""Pydantic Schemas: request/response validation for API endpoints.

Invariants:
    - Schemas validate at the system boundary (request bodies, response records)
    - Create and Update schemas require the same fields (Update is a full replacement)
"""
