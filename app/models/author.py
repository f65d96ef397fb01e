from __future__ import annotations
from typing import TYPE_CHECKING
from sqlalchemy import Integer, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship
from app.models.base import Base, TimestampMixin

if TYPE_CHECKING:
    from app.models.book import Book

#Author
class Author(TimestampMixin, Base):
    __tablename__: str = "authors"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(Text, nullable=False)

    # Books are never cascaded or nulled out from here; the FK restricts deletes.
    books: Mapped[list[Book]] = relationship(
        back_populates="author",
        passive_deletes="all",
        order_by="Book.id",
    )

    def __repr__(self) -> str:
        return f"Author(id={self.id}, name={self.name!r})"
