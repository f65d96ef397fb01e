from app.schemas.author import AuthorRead
from app.schemas.base import CatalogModel
from app.schemas.book import BookRead


class SearchResult(CatalogModel):
    books: list[BookRead] = []
    authors: list[AuthorRead] = []
