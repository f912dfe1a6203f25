"""Services Layer — orchestrates async store calls around pure core logic.

Invariants:
    - Services depend on core protocols, never on concrete stores
"""
