from typing import Annotated
from fastapi import Depends
from sqlalchemy.orm import Session

from app.db.session import get_db
from app.services.author_service import AuthorService
from app.services.book_service import BookService
from app.services.search_service import SearchService

DbSession = Annotated[Session, Depends(get_db)]


def get_author_service(db: DbSession) -> AuthorService:
    return AuthorService(db)


def get_book_service(db: DbSession) -> BookService:
    return BookService(db)


def get_search_service(db: DbSession) -> SearchService:
    return SearchService(db)
