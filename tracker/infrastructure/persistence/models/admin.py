"""Admin ORM model: dashboard account (global, not server-scoped)."""

from sqlalchemy import Boolean, String, text
from sqlalchemy.orm import Mapped, mapped_column

from tracker.infrastructure.persistence.database import Base
from tracker.infrastructure.persistence.models.mixins import CreatedAtMixin, CuidMixin


class Admin(CuidMixin, CreatedAtMixin, Base):
    """Admin model. Table: admin. Email is stored lower-cased and unique."""

    __tablename__ = "admin"

    email: Mapped[str] = mapped_column(String, unique=True, nullable=False, index=True)
    password_hash: Mapped[str] = mapped_column(String, nullable=False)
    name: Mapped[str] = mapped_column(String, nullable=False)
    is_email_verified: Mapped[bool] = mapped_column(
        Boolean, nullable=False, default=False, server_default=text("false")
    )
