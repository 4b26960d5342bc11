"""Core Layer — pure domain logic, no IO, no async, no DB.

Invariants:
    - No module in core/ imports from services/, api/, infrastructure/, or db/
    - Access decisions and patch validation are pure and deterministic

Design Decisions:
    - Functional core separated from imperative shell: services do the IO around it
"""
