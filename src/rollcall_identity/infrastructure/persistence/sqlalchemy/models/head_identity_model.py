"""SQLAlchemy model for HeadIdentity aggregate."""

from datetime import datetime
from uuid import UUID

from sqlalchemy import Boolean, DateTime, String, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from rollcall.domain.shared.time import utc_now
from rollcall_identity.infrastructure.persistence.sqlalchemy.base import Base


class HeadIdentityModel(Base):
    """Pre-provisioned department-head identities.

    ``linked_account_id`` carries no foreign key: deleting the head account
    leaves the identity registered.
    """

    __tablename__ = "head_identities"

    head_identifier: Mapped[str] = mapped_column(String(64), primary_key=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    department: Mapped[str] = mapped_column(String(255), nullable=False)
    password_hash: Mapped[str | None] = mapped_column(String(255), nullable=True)
    is_registered: Mapped[bool] = mapped_column(
        Boolean,
        default=False,
        nullable=False,
    )
    linked_account_id: Mapped[UUID | None] = mapped_column(Uuid, nullable=True)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=utc_now,
        nullable=False,
    )

    def __repr__(self) -> str:
        return (
            f"<HeadIdentityModel(head_identifier={self.head_identifier}, "
            f"is_registered={self.is_registered})>"
        )
