"""
Base model untuk SQLAlchemy.
Semua model harus inherit dari BaseModel untuk mendapatkan common fields dan behavior.
"""

from datetime import datetime, timezone
import uuid

from sqlalchemy import Column, DateTime, Uuid, inspect
from sqlalchemy.orm import as_declarative


@as_declarative()
class Base:
    """
    Base class untuk semua SQLAlchemy models.
    Menggunakan @as_declarative untuk membuat declarative base.
    Setiap model mendeklarasikan __tablename__ sendiri.
    """

    def __repr__(self) -> str:
        class_name = self.__class__.__name__

        primary_keys = []
        for column in inspect(self.__class__).primary_key:
            value = getattr(self, column.name)
            primary_keys.append(f"{column.name}={value}")

        if primary_keys:
            return f"<{class_name}({', '.join(primary_keys)})>"
        return f"<{class_name}>"


class BaseModel(Base):
    """
    Abstract base model dengan UUID primary key dan timestamp fields.
    """
    __abstract__ = True

    id = Column(
        Uuid(as_uuid=True),
        primary_key=True,
        default=uuid.uuid4,
        nullable=False
    )

    created_at = Column(
        DateTime(timezone=True),
        default=lambda: datetime.now(timezone.utc),
        nullable=False,
        index=True
    )

    updated_at = Column(
        DateTime(timezone=True),
        default=None,
        onupdate=lambda: datetime.now(timezone.utc),
        nullable=True
    )
