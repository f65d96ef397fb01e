from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from app.core.exceptions import HasDependentsError, NotFoundError
from app.core.logging import get_logger
from app.models.base import utcnow
from app.repos.author_repo import AuthorRepository
from app.schemas.author import (
    AuthorCreate,
    AuthorDetail,
    AuthorRead,
    AuthorUpdate,
    AuthorWithBookCount,
)

logger = get_logger(__name__)

AUTHOR_NOT_FOUND = "Author not found"
AUTHOR_HAS_BOOKS = "Cannot delete author with books. Delete the books first."


class AuthorService:
    """Author CRUD over an injected session."""

    def __init__(self, db: Session):
        self.db: Session = db

    # List authors with book counts
    def list_authors(self) -> list[AuthorWithBookCount]:
        return [
            AuthorWithBookCount(
                id=author.id,
                name=author.name,
                created_at=author.created_at,
                updated_at=author.updated_at,
                book_count=count,
            )
            for author, count in AuthorRepository.list_with_book_counts(self.db)
        ]

    # Get author with its books
    def get_author(self, author_id: int) -> AuthorDetail:
        author = AuthorRepository.get_with_books(self.db, author_id)
        if author is None:
            raise NotFoundError(AUTHOR_NOT_FOUND)
        return AuthorDetail.model_validate(author)

    # Create author
    def create_author(self, data: AuthorCreate) -> AuthorRead:
        author = AuthorRepository.create(self.db, data)
        logger.info("Author created id=%s", author.id)
        return AuthorRead.model_validate(author)

    # Update author
    def update_author(self, author_id: int, data: AuthorUpdate) -> AuthorRead:
        author = AuthorRepository.get(self.db, author_id)
        if author is None:
            raise NotFoundError(AUTHOR_NOT_FOUND)

        author.name = data.name
        author.updated_at = utcnow()
        self.db.commit()
        self.db.refresh(author)
        logger.info("Author updated id=%s", author.id)
        return AuthorRead.model_validate(author)

    def delete_author(self, author_id: int) -> None:
        """
        Delete an author that owns no books.

        The row is locked while its books are counted, so no book can be
        attached between the check and the delete. Should the store still
        refuse the delete (RESTRICT foreign key), the author is reported as
        having dependents.
        """
        try:
            author = AuthorRepository.get_for_update(self.db, author_id)
            if author is None:
                raise NotFoundError(AUTHOR_NOT_FOUND)
            if AuthorRepository.count_books(self.db, author_id) > 0:
                raise HasDependentsError(AUTHOR_HAS_BOOKS)

            self.db.delete(author)
            self.db.commit()
        except IntegrityError as e:
            self.db.rollback()
            raise HasDependentsError(AUTHOR_HAS_BOOKS) from e
        except Exception:
            self.db.rollback()
            raise

        logger.info("Author deleted id=%s", author_id)
