from sqlalchemy import func, select
from sqlalchemy.orm import Session, selectinload

from app.models.author import Author
from app.models.book import Book
from app.schemas.author import AuthorCreate


class AuthorRepository:

    @staticmethod
    # Create a new author
    def create(db: Session, data: AuthorCreate) -> Author:
        author = Author(name=data.name)
        db.add(author)
        db.commit()
        db.refresh(author)
        return author

    @staticmethod
    # List authors with the number of books each one owns
    def list_with_book_counts(db: Session) -> list[tuple[Author, int]]:
        stmt = (
            select(Author, func.count(Book.id))
            .outerjoin(Book, Book.author_id == Author.id)
            .group_by(Author.id)
            .order_by(Author.id)
        )
        return [(author, int(count)) for author, count in db.execute(stmt).all()]

    @staticmethod
    # Get an author by ID
    def get(db: Session, author_id: int) -> Author | None:
        return db.get(Author, author_id)

    @staticmethod
    # Get an author by ID with its books loaded
    def get_with_books(db: Session, author_id: int) -> Author | None:
        stmt = (
            select(Author)
            .where(Author.id == author_id)
            .options(selectinload(Author.books))
        )
        return db.scalars(stmt).first()

    @staticmethod
    # Get an author by ID for update
    def get_for_update(db: Session, author_id: int) -> Author | None:
        stmt = select(Author).where(Author.id == author_id).with_for_update()
        return db.scalars(stmt).first()

    @staticmethod
    # Count the books of an author
    def count_books(db: Session, author_id: int) -> int:
        stmt = select(func.count(Book.id)).where(Book.author_id == author_id)
        return int(db.scalar(stmt) or 0)

    @staticmethod
    # Search authors by name
    def search_by_name(db: Session, pattern: str) -> list[Author]:
        stmt = (
            select(Author)
            .where(Author.name.ilike(pattern, escape="\\"))
            .order_by(Author.id)
        )
        return list(db.scalars(stmt).all())
