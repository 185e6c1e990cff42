"""SQLAlchemy model for Account aggregate."""

from uuid import UUID

from sqlalchemy import Index, String, UniqueConstraint, Uuid, text
from sqlalchemy.orm import Mapped, mapped_column

from rollcall_identity.infrastructure.persistence.sqlalchemy.base import (
    Base,
    TimestampMixin,
)


class AccountModel(Base, TimestampMixin):
    """SQLAlchemy model for persisting Account aggregates.

    Roll numbers are unique among students only, so the index is partial.
    """

    __tablename__ = "accounts"
    __table_args__ = (
        UniqueConstraint("email", name="uq_accounts_email"),
        UniqueConstraint("head_identifier", name="uq_accounts_head_identifier"),
        Index(
            "uq_accounts_student_roll_number",
            "roll_number",
            unique=True,
            postgresql_where=text("role = 'student'"),
            sqlite_where=text("role = 'student'"),
        ),
    )

    id: Mapped[UUID] = mapped_column(Uuid, primary_key=True)
    email: Mapped[str] = mapped_column(String(255), nullable=False)
    name: Mapped[str | None] = mapped_column(String(255), nullable=True)
    password_hash: Mapped[str] = mapped_column(String(255), nullable=False)
    role: Mapped[str] = mapped_column(String(20), default="student", nullable=False)
    head_identifier: Mapped[str | None] = mapped_column(String(64), nullable=True)
    roll_number: Mapped[str | None] = mapped_column(String(64), nullable=True)
    department: Mapped[str | None] = mapped_column(String(255), nullable=True)

    def __repr__(self) -> str:
        return f"<AccountModel(id={self.id}, email={self.email}, role={self.role})>"
