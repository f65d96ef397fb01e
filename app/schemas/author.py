from __future__ import annotations

from pydantic import field_validator

from app.schemas.base import CatalogModel, UtcDatetime, trim_required


# Author base schema
class AuthorBase(CatalogModel):
    name: str

    @field_validator("name", mode="before")
    @classmethod
    def trim_and_check(cls, v: object) -> object:
        return trim_required(v, "name")

# Author create schema
class AuthorCreate(AuthorBase):
    pass

# Author update schema
class AuthorUpdate(AuthorBase):
    pass

# Author read schema
class AuthorRead(AuthorBase):
    id: int
    created_at: UtcDatetime
    updated_at: UtcDatetime

# Author list entry, annotated with how many books it owns
class AuthorWithBookCount(AuthorRead):
    book_count: int

# Author detail, with every book it owns
class AuthorDetail(AuthorRead):
    books: list[BookSummary] = []

# Minimal author embedded in book responses
class AuthorSummary(CatalogModel):
    id: int
    name: str


from app.schemas.book import BookSummary  # noqa: E402

AuthorDetail.model_rebuild()
