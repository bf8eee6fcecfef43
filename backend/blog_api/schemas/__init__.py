"""Pydantic Schemas: wire representation of core values.

Invariants:
    - Schemas convert at the system boundary only; core never imports them

Design Decisions:
    - Separate from core.post: schemas are API contracts, Post is the domain value
"""
