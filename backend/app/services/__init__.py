"""Services Layer — use-cases that orchestrate IO around the pure core.

Invariants:
    - One service per resource plus the authorization gate
    - Services depend on core protocols, never on SQLAlchemy directly

Design Decisions:
    - Constructor-injected repositories (ADR: explicit dependencies, no globals)
"""
