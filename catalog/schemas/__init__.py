"""Pydantic Schemas — validated shapes at the system boundary.

Invariants:
    - Schemas never import ORM models (projection goes model -> schema only)

Design Decisions:
    - Separate from models: schemas are contracts, models are persistence
"""
