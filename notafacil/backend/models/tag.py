"""
Tag Model.
"""

from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column

from notafacil.backend.models.base import Base, CreatedAtMixin, UUIDMixin


class TagModel(UUIDMixin, CreatedAtMixin, Base):
    """Tag database model."""

    __tablename__ = "tags"

    name: Mapped[str] = mapped_column(
        String(50),
        nullable=False,
        unique=True,
    )
    color: Mapped[str] = mapped_column(
        String(7),
        nullable=False,
        default="#cccccc",
    )

    def __repr__(self) -> str:
        return f"<TagModel(id={self.id}, name={self.name!r})>"
