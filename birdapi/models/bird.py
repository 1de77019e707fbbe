"""
BirdAPI: Bird SQLAlchemy Model
===============================

What:  ORM model for the `birds` table.
Who:   Used by SqlBirdStore for inserts and reads, and by
       create_schema() to create the table.

Table Design:
    - id: surrogate key. Never exposed by the API; it lets the ORM map
      rows and gives reads a stable insertion order.
    - species / description: free text, no uniqueness constraint.
"""

from sqlalchemy import Integer, Text
from sqlalchemy.orm import Mapped, mapped_column

from birdapi.database import Base


class BirdRecord(Base):
    """One stored bird sighting. Rows are only ever inserted, never updated."""

    __tablename__ = "birds"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)

    species: Mapped[str] = mapped_column(Text, nullable=False, default="")

    description: Mapped[str] = mapped_column(Text, nullable=False, default="")

    def __repr__(self) -> str:
        return f"<BirdRecord(id={self.id}, species='{self.species}')>"
