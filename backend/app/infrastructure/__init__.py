"""Infrastructure Layer — persistence adapters and cross-cutting concerns.

Invariants:
    - Infrastructure implements core protocols; core never imports from here
    - All storage errors mapped to the core error hierarchy

Design Decisions:
    - One adapter module per boundary (database, repositories, session store, logging)
"""
