"""Pydantic Schemas — response contracts for API endpoints.

Invariants:
    - Schemas shape what leaves the system boundary (JSON bodies)
    - Dates are already YYYY-MM-DD strings by the time they reach a schema

Design Decisions:
    - Separate from models: schemas are API contracts, models are persistence
"""
