"""One-time verification code for email verification, password change, and email change."""

from datetime import datetime

from sqlalchemy import CheckConstraint, DateTime, ForeignKey, Index, String
from sqlalchemy.orm import Mapped, mapped_column

from tracker.infrastructure.persistence.database import Base
from tracker.infrastructure.persistence.models.mixins import CreatedAtMixin, CuidMixin


class VerificationToken(CuidMixin, CreatedAtMixin, Base):
    """Pending code. new_email / new_password_hash carry the payload of change tokens."""

    __tablename__ = "verification_token"

    admin_id: Mapped[str] = mapped_column(
        String,
        ForeignKey("admin.id", ondelete="CASCADE"),
        nullable=False,
    )
    code: Mapped[str] = mapped_column(String(6), nullable=False)
    type: Mapped[str] = mapped_column(String(32), nullable=False)
    new_email: Mapped[str | None] = mapped_column(String, nullable=True)
    new_password_hash: Mapped[str | None] = mapped_column(String, nullable=True)
    expires_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, index=True
    )

    __table_args__ = (
        CheckConstraint(
            "type IN ('email_verification', 'password_change', 'email_change')",
            name="ck_verification_token_type",
        ),
        Index("ix_verification_token_admin_type", "admin_id", "type"),
    )
