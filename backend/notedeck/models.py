"""SQLAlchemy ORM models."""

from datetime import datetime

from sqlalchemy import DateTime, ForeignKey, String, Text, UniqueConstraint, func
from sqlalchemy.orm import Mapped, mapped_column, relationship

from notedeck.database import Base


class Note(Base):
    """Free-text note owned by a single owner."""

    __tablename__ = "notes"
    __table_args__ = (UniqueConstraint("owner", "name", name="uq_note_owner_name"),)

    id: Mapped[int] = mapped_column(primary_key=True, index=True)
    owner: Mapped[str] = mapped_column(String(255), index=True, nullable=False)
    name: Mapped[str] = mapped_column(String(500), nullable=False)
    body: Mapped[str] = mapped_column(Text, nullable=False, default="")
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), nullable=False
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), onupdate=func.now(), nullable=False
    )

    def __repr__(self) -> str:
        return f"<Note(id={self.id}, owner='{self.owner}', name='{self.name}')>"


class FlashcardSet(Base):
    """Named set of cards owned by a single owner."""

    __tablename__ = "flashcard_sets"
    __table_args__ = (UniqueConstraint("owner", "name", name="uq_flashcard_set_owner_name"),)

    id: Mapped[int] = mapped_column(primary_key=True, index=True)
    owner: Mapped[str] = mapped_column(String(255), index=True, nullable=False)
    name: Mapped[str] = mapped_column(String(500), nullable=False)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), nullable=False
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), onupdate=func.now(), nullable=False
    )

    cards: Mapped[list["Card"]] = relationship(
        back_populates="flashcard_set",
        cascade="all, delete-orphan",
        order_by="Card.id",
    )

    def __repr__(self) -> str:
        return f"<FlashcardSet(id={self.id}, owner='{self.owner}', name='{self.name}')>"


class Card(Base):
    """Question/answer card embedded in a flashcard set."""

    __tablename__ = "cards"

    id: Mapped[int] = mapped_column(primary_key=True, index=True)
    flashcard_set_id: Mapped[int] = mapped_column(
        ForeignKey("flashcard_sets.id", ondelete="CASCADE"), index=True, nullable=False
    )
    question: Mapped[str] = mapped_column(Text, nullable=False)
    answer: Mapped[str] = mapped_column(Text, nullable=False)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), nullable=False
    )

    flashcard_set: Mapped[FlashcardSet] = relationship(back_populates="cards")

    def __repr__(self) -> str:
        return f"<Card(id={self.id}, flashcard_set_id={self.flashcard_set_id})>"
