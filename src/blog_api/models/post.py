"""Post model."""

from sqlalchemy import JSON, Boolean, Column, DateTime, ForeignKey, Index, Integer, String, Text

from ..core.db.database import Base
from ._timestamps import utcnow


class Post(Base):
    """Blog post identified publicly by its slug.

    ``likes`` and ``dislikes`` hold user ids. They are replaced wholesale on
    every change, never mutated in place, so SQLAlchemy sees the update.
    """

    __tablename__ = "posts"
    __table_args__ = (
        Index("ix_posts_published_created_at", "published", "created_at"),
    )

    id = Column(Integer, primary_key=True, index=True)
    slug = Column(String(255), unique=True, index=True, nullable=False)
    title = Column(String(200), nullable=False)
    content = Column(Text, nullable=False)
    excerpt = Column(String(500), nullable=True)
    cover_image = Column(String(2048), nullable=False, default="")
    author_id = Column(Integer, ForeignKey("users.id", ondelete="SET NULL"), index=True, nullable=True)
    published = Column(Boolean, nullable=False, default=False)
    likes = Column(JSON, nullable=False, default=list)
    dislikes = Column(JSON, nullable=False, default=list)
    tags = Column(JSON, nullable=False, default=list)
    version = Column(Integer, nullable=False)

    created_at = Column(DateTime(timezone=True), default=utcnow, nullable=False)
    updated_at = Column(DateTime(timezone=True), default=utcnow, onupdate=utcnow, nullable=False)

    __mapper_args__ = {"version_id_col": version}
