"""Core Layer: registry state logic, no IO, no async, no DB.

Invariants:
    - No module in core/ imports from services/, api/, infrastructure/, or db/
    - The Registry is the only mutator of catalog, ownership and balance stores

Design Decisions:
    - Functional core separated from imperative shell: routes and the
      registry service wrap these types, they never reach into the stores
"""
