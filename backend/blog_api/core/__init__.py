"""Core Layer: post entity, id allocation, storage and request conversion.

Invariants:
    - No module in core/ imports from services/, api/, schemas/ or infrastructure/
    - No IO and no async; every operation runs to completion synchronously

Design Decisions:
    - Functional core separated from the HTTP shell (routes only translate)
"""
