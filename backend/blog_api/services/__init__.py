"""Services Layer: orchestration of core operations.

Invariants:
    - Services compose core/ pieces; they never touch HTTP types
"""
