"""Note ORM — a free-text note kept by the learner.

Invariants:
    - text is never NULL; blank text is rejected before it reaches this table
    - id is assigned by the database and only grows, so id DESC is newest-first

Design Decisions:
    - Integer autoincrement key over UUID: notes are listed by insertion order
      and addressed by short ids in the route path
"""

from sqlalchemy import Integer, Text
from sqlalchemy.orm import Mapped, mapped_column

from vyral.db.base import Base


class Note(Base):
    """One row per saved note."""
    __tablename__ = "notes"

    id: Mapped[int] = mapped_column(
        Integer, primary_key=True, autoincrement=True,
    )
    text: Mapped[str] = mapped_column(Text, nullable=False)

    def as_dict(self) -> dict:
        return {"id": self.id, "text": self.text}
