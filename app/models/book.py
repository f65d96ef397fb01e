from __future__ import annotations
from typing import TYPE_CHECKING
from sqlalchemy.orm import Mapped, mapped_column, relationship
from sqlalchemy import ForeignKey, Integer, CheckConstraint, Text, Constraint
from app.models.base import Base, TimestampMixin

if TYPE_CHECKING:
    from app.models.author import Author

YEAR_MIN = 1000
YEAR_MAX = 9999

#Book
class Book(TimestampMixin, Base):
    __tablename__: str = "books"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    title: Mapped[str] = mapped_column(Text, nullable=False)
    year: Mapped[int] = mapped_column(Integer, nullable=False)
    author_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("authors.id", ondelete="RESTRICT"),
        nullable=False,
        index=True,
    )

    author: Mapped[Author] = relationship(back_populates="books")

    __table_args__: tuple[Constraint, ...] = (
            CheckConstraint(
                f"year BETWEEN {YEAR_MIN} AND {YEAR_MAX}", name="books_year_range"
            ),
    )

    def __repr__(self) -> str:
        return f"<Book id={self.id} title={self.title!r} year={self.year}>"
