"""Core Layer: error hierarchy, domain types, and boundary protocols.

Invariants:
    - No module in core/ imports from services/, api/, infrastructure/, or db/
    - No IO, no async implementations (protocols only declare async signatures)
"""
