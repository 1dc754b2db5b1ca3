"""
Tutor API — Tutor SQLAlchemy Model
===================================

What:  ORM model representing the `tutor` table.
Why:   Maps Python objects to database rows for type-safe database operations.
How:   Inherits from SQLAlchemy's DeclarativeBase; Alembic reads this for migrations.
Who:   Used by TutorRepository for CRUD operations and by Alembic for schema management.

Table Design Rationale:
    - BIGINT autoincrement primary key: assigned by the database on insert,
      so `id is None` means "never persisted"
    - Every other column is nullable: the service stores whatever the client
      sends and performs no content validation
"""

from typing import Optional

from sqlalchemy import BigInteger, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from tutor_api.database import Base


class Tutor(Base):
    """
    A tutor record.

    Lifecycle:
        1. Created by POST /api/tutors (id assigned by the database)
        2. Replaced wholesale by PUT /api/tutors (keyed by id)
        3. Removed by DELETE /api/tutors/{id}
    """

    __tablename__ = "tutor"

    # ── Primary Key ───────────────────────────────────────────────────────
    # SQLite only autoincrements an INTEGER PRIMARY KEY, hence the variant
    id: Mapped[int] = mapped_column(
        BigInteger().with_variant(Integer, "sqlite"),
        primary_key=True,
        autoincrement=True,
    )

    # ── Attributes ────────────────────────────────────────────────────────
    name: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)
    email: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)
    phone: Mapped[Optional[str]] = mapped_column(String(50), nullable=True)
    subject: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)

    def __repr__(self) -> str:
        """Developer-friendly string representation for debugging."""
        return (
            f"<Tutor(id={self.id}, name='{self.name}', email='{self.email}', "
            f"phone='{self.phone}', subject='{self.subject}')>"
        )
