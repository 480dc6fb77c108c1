"""
Note Models.

`notes` holds the note rows; `note_tags` holds each note's ordered tag ids.
Tag ids are weak references: there is no foreign key to `tags`.
"""

from sqlalchemy import ForeignKey, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from notafacil.backend.models.base import Base, TimestampMixin, UUIDMixin


class NoteModel(UUIDMixin, TimestampMixin, Base):
    """Note database model."""

    __tablename__ = "notes"

    title: Mapped[str] = mapped_column(
        String(100),
        nullable=False,
        index=True,
    )
    content: Mapped[str] = mapped_column(
        Text,
        nullable=False,
        default="",
    )

    tag_links: Mapped[list["NoteTagModel"]] = relationship(
        back_populates="note",
        cascade="all, delete-orphan",
        lazy="selectin",
        order_by="NoteTagModel.position",
    )

    @property
    def tag_ids(self) -> list[str]:
        return [link.tag_id for link in self.tag_links]

    def __repr__(self) -> str:
        return f"<NoteModel(id={self.id}, title={self.title!r})>"


class NoteTagModel(Base):
    """One entry of a note's tag list. Keyed by position, so a tag id may repeat."""

    __tablename__ = "note_tags"

    note_id: Mapped[str] = mapped_column(
        String,
        ForeignKey("notes.id", ondelete="CASCADE"),
        primary_key=True,
    )
    position: Mapped[int] = mapped_column(
        Integer,
        primary_key=True,
        autoincrement=False,
    )
    tag_id: Mapped[str] = mapped_column(
        String,
        nullable=False,
        index=True,
    )

    note: Mapped[NoteModel] = relationship(back_populates="tag_links")

    def __repr__(self) -> str:
        return f"<NoteTagModel(note_id={self.note_id}, position={self.position}, tag_id={self.tag_id})>"
