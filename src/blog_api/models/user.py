"""User model backing the identity directory."""

from sqlalchemy import Column, DateTime, Integer, String, Text

from ..core.db.database import Base
from ._timestamps import utcnow

ROLE_ADMIN = "admin"
ROLE_USER = "user"


class User(Base):
    """Registered account. A null role means a basic account."""

    __tablename__ = "users"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(100), nullable=False)
    email = Column(String(254), unique=True, index=True, nullable=False)
    password_hash = Column(String(255), nullable=False)
    role = Column(String(20), nullable=True, default=ROLE_USER)
    image = Column(String(2048), nullable=True)
    bio = Column(Text, nullable=True)

    created_at = Column(DateTime(timezone=True), default=utcnow, nullable=False)
    updated_at = Column(DateTime(timezone=True), default=utcnow, onupdate=utcnow, nullable=False)

    @property
    def is_admin(self) -> bool:
        return self.role == ROLE_ADMIN
