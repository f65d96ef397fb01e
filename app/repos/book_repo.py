from __future__ import annotations
from sqlalchemy.orm import Session, contains_eager, joinedload
from sqlalchemy import or_, select
from sqlalchemy.sql.expression import ColumnElement
from app.models.author import Author
from app.models.book import Book
from app.schemas.book import BookCreate
class BookRepository:
    @staticmethod

    # Create a new book
    def create(db: Session, data: BookCreate) -> Book:
        book = Book(**data.model_dump())
        db.add(book)
        db.commit()
        return book

    @staticmethod
    # List books with their author
    def list(db: Session) -> list[Book]:
        stmt = select(Book).options(joinedload(Book.author)).order_by(Book.id)
        return list(db.scalars(stmt).all())

    @staticmethod
    # Get a book by ID with its author
    def get(db: Session, book_id: int) -> Book | None:
        stmt = select(Book).where(Book.id == book_id).options(joinedload(Book.author))
        return db.scalars(stmt).first()

    @staticmethod
    # Search books by title, author name or exact year
    def search(db: Session, pattern: str, year: int | None = None) -> list[Book]:
        conditions: list[ColumnElement[bool]] = [
            Book.title.ilike(pattern, escape="\\"),
            Author.name.ilike(pattern, escape="\\"),
        ]
        if year is not None:
            conditions.append(Book.year == year)

        stmt = (
            select(Book)
            .join(Book.author)
            .options(contains_eager(Book.author))
            .where(or_(*conditions))
            .order_by(Book.id)
        )
        return list(db.scalars(stmt).unique().all())
