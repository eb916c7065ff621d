"""Service Layer — request orchestration over injected repositories.

Invariants:
    - Services depend on core/repository_protocols.py, never on SQLAlchemy
"""
