"""
Campus Web — User SQLAlchemy Model
====================================

What:  Registered site accounts. Only the bcrypt hash of the password is stored.
"""

from datetime import datetime, timezone

from sqlalchemy import DateTime, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from campusweb.database import Base


class User(Base):
    __tablename__ = "users"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    name: Mapped[str] = mapped_column(String(100), nullable=False)
    email: Mapped[str] = mapped_column(String(255), unique=True, nullable=False, index=True)
    password_hash: Mapped[str] = mapped_column(String(255), nullable=False)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
    )

    def to_session(self) -> dict:
        """Session-safe representation (never includes the password hash)."""
        return {"id": self.id, "name": self.name, "email": self.email}

    def __repr__(self) -> str:
        return f"<User(id={self.id}, email='{self.email}')>"
