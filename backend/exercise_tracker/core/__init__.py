"""Core Layer — domain types, validation, date normalization, errors. No DB, no HTTP.

Invariants:
    - No module in core/ imports from services/, api/, infrastructure/, or db/
    - Functions are pure and deterministic (clock and randomness injected or isolated
      in identifiers.py)
    - repository_protocols.py declares the async store contracts; core never calls them

Design Decisions:
    - Functional core separated from imperative shell
"""
