from sqlalchemy.orm import Session

from app.models.book import YEAR_MAX, YEAR_MIN
from app.repos.author_repo import AuthorRepository
from app.repos.book_repo import BookRepository
from app.schemas.author import AuthorRead
from app.schemas.book import BookRead
from app.schemas.search import SearchResult


def normalize_query(query: str) -> str:
    return query.strip().lower()


def parse_year(query: str) -> int | None:
    """Whole-number queries within the year range also match on year."""
    if query.isascii() and query.isdigit():
        year = int(query)
        if YEAR_MIN <= year <= YEAR_MAX:
            return year
    return None


def contains_pattern(term: str) -> str:
    """LIKE pattern matching `term` literally anywhere in the value."""
    escaped = term.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")
    return f"%{escaped}%"


class SearchService:
    def __init__(self, db: Session):
        self.db: Session = db

    def search(self, query: str) -> SearchResult:
        """
        Books whose title or author name contains the query, or whose year
        equals it, plus authors whose name contains it.
        """
        term = normalize_query(query)
        if not term:
            return SearchResult(books=[], authors=[])

        pattern = contains_pattern(term)
        books = BookRepository.search(self.db, pattern, year=parse_year(term))
        authors = AuthorRepository.search_by_name(self.db, pattern)

        return SearchResult(
            books=[BookRead.model_validate(book) for book in books],
            authors=[AuthorRead.model_validate(author) for author in authors],
        )
