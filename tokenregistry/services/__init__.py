"""Services Layer: async orchestration around the pure registry core.

Invariants:
    - Services validate through the core, persist, then commit the core mutation
    - Routes talk to services, never to the stores
"""
