"""Infrastructure Layer: database access, logging and notification delivery.

Invariants:
    - Infrastructure never mutates registry state directly
    - Notification failures are logged, never propagated into the core

Design Decisions:
    - Concrete collaborators live here; core/ only sees their Protocols
"""
