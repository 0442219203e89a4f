"""Streambase Application Package: users and videos over a REST API.

Invariants:
    - Package root contains no executable code (import side-effects prohibited)
"""
