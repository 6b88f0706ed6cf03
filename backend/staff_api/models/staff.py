import uuid
from datetime import datetime

from sqlalchemy import String, DateTime
from sqlalchemy.orm import Mapped, mapped_column

from staff_api.db.base import Base


def _new_id() -> str:
    return uuid.uuid4().hex


class Staff(Base):
    __tablename__ = "staff"

    id: Mapped[str] = mapped_column(String(32), primary_key=True, default=_new_id)

    username: Mapped[str] = mapped_column(String(200), nullable=False)
    email: Mapped[str] = mapped_column(String(320), nullable=False, unique=True)
    phone: Mapped[str] = mapped_column(String(11), nullable=False, unique=True)
    cnic: Mapped[str] = mapped_column(String(13), nullable=False, unique=True)

    # bcrypt hash, never the plaintext
    password: Mapped[str] = mapped_column(String(100), nullable=False)

    # identifier of a role owned by the role service
    role: Mapped[str] = mapped_column(String(100), nullable=False, index=True)

    created_at: Mapped[datetime] = mapped_column(DateTime, default=datetime.utcnow)
    updated_at: Mapped[datetime] = mapped_column(
        DateTime,
        default=datetime.utcnow,
        onupdate=datetime.utcnow,
    )
