"""Infrastructure Layer — store adapter and cross-cutting concerns.

Invariants:
    - Infrastructure never contains validation or response-shaping logic
    - All SQLAlchemy errors mapped to StoreError at the session boundary
"""
