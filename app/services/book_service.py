from __future__ import annotations
from sqlalchemy.orm import Session
from sqlalchemy.exc import IntegrityError

from app.core.exceptions import InvalidReferenceError, NotFoundError
from app.core.logging import get_logger
from app.models.base import utcnow
from app.repos.book_repo import BookRepository
from app.schemas.book import BookCreate, BookRead, BookUpdate

logger = get_logger(__name__)

BOOK_NOT_FOUND = "Book not found"


class BookService:
    """Book CRUD over an injected session."""

    def __init__(self, db: Session):
        self.db: Session = db

    # List books
    def list_books(self) -> list[BookRead]:
        return [BookRead.model_validate(book) for book in BookRepository.list(self.db)]

    # Get book
    def get_book(self, book_id: int) -> BookRead:
        book = BookRepository.get(self.db, book_id)
        if book is None:
            raise NotFoundError(BOOK_NOT_FOUND)
        return BookRead.model_validate(book)

    # Create book
    def create_book(self, data: BookCreate) -> BookRead:
        try:
            book = BookRepository.create(self.db, data)
        except IntegrityError as e:
            self.db.rollback()
            logger.info("Rejected book for unknown author id=%s", data.author_id)
            raise InvalidReferenceError(
                "Failed to create book. Author does not exist."
            ) from e

        logger.info("Book created id=%s", book.id)
        return self.get_book(book.id)

    def update_book(self, book_id: int, data: BookUpdate) -> BookRead:
        """
        Apply the supplied fields only; updated_at always moves.

        An unknown book and an unknown author both come back as not found.
        """
        book = BookRepository.get(self.db, book_id)
        if book is None:
            raise NotFoundError(BOOK_NOT_FOUND)

        for field, value in data.changes().items():
            setattr(book, field, value)
        book.updated_at = utcnow()

        try:
            self.db.commit()
        except IntegrityError as e:
            self.db.rollback()
            raise NotFoundError("Book or author not found") from e

        logger.info("Book updated id=%s", book_id)
        return self.get_book(book_id)

    # Delete book
    def delete_book(self, book_id: int) -> None:
        book = BookRepository.get(self.db, book_id)
        if book is None:
            raise NotFoundError(BOOK_NOT_FOUND)

        self.db.delete(book)
        self.db.commit()
        logger.info("Book deleted id=%s", book_id)
