from __future__ import annotations

from typing import Annotated
from pydantic import Field, field_validator, model_validator

from app.models.base import MAX_ID
from app.models.book import YEAR_MAX, YEAR_MIN
from app.schemas.base import CatalogModel, UtcDatetime, trim_required

Year = Annotated[int, Field(ge=YEAR_MIN, le=YEAR_MAX)]
AuthorId = Annotated[int, Field(gt=0, le=MAX_ID)]


# Book base schema
class BookBase(CatalogModel):
    title: str
    author_id: AuthorId
    year: Year

    @field_validator("title", mode="before")
    @classmethod
    def trim_and_check(cls, v: object) -> object:
        return trim_required(v, "title")

# Book create schema
class BookCreate(BookBase):
    pass

# Book update schema: any non-empty subset of the fields
class BookUpdate(CatalogModel):
    title: str | None = None
    author_id: AuthorId | None = None
    year: Year | None = None

    @field_validator("title", mode="before")
    @classmethod
    def trim_and_check(cls, v: object) -> object:
        return trim_required(v, "title")

    @model_validator(mode="after")
    def at_least_one_field(self) -> BookUpdate:
        if not self.changes():
            raise ValueError("at least one of title, authorId or year is required")
        return self

    def changes(self) -> dict[str, object]:
        return self.model_dump(exclude_none=True)

# Book without its author, as listed under an author
class BookSummary(BookBase):
    id: int
    created_at: UtcDatetime
    updated_at: UtcDatetime

# Book read schema, author joined
class BookRead(BookSummary):
    author: AuthorSummary


from app.schemas.author import AuthorSummary  # noqa: E402

BookRead.model_rebuild()
