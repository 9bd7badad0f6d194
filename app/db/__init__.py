"""
Database module untuk UserAuth API.
Berisi base model, session management, dan konfigurasi database.
"""

from app.db.base import Base, BaseModel
from app.db.session import (
    engine,
    SessionLocal,
    init_db,
    close_db
)

__all__ = [
    "Base",
    "BaseModel",
    "engine",
    "SessionLocal",
    "init_db",
    "close_db"
]
