"""ORM Models — SQLAlchemy declarative models for persisted entities.

Invariants:
    - All models inherit from Base (db/base.py)
    - Ledger state is in-memory; only notes are persisted

Design Decisions:
    - One file per entity for locality
    - All models imported here so Base.metadata is complete before create_all
      or an Alembic autogenerate runs
"""

from vyral.models.note import Note  # noqa: F401
