"""
Load a fixed sample catalog of design books.

Usage: python -m app.db.seed
"""
from sqlalchemy import delete
from sqlalchemy.orm import Session

from app.core.config import settings
from app.core.logging import get_logger, setup_logging
from app.db.session import SessionLocal
from app.models.author import Author
from app.models.book import Book

logger = get_logger(__name__)

SEED_AUTHORS: tuple[str, ...] = (
    "Steve Krug",
    "Don Norman",
    "Jake Knapp",
    "Jeff Gothelf",
    "Nir Eyal",
    "Brad Frost",
    "Adam Wathan & Steve Schoger",
    "Aaron Walter",
    "Erika Hall",
    "Tom Greever",
    "Ellen Lupton",
    "Alan Cooper",
    "William Lidwell",
)

# (title, year, author name)
SEED_BOOKS: tuple[tuple[str, int, str], ...] = (
    ("Don't Make Me Think", 2013, "Steve Krug"),
    ("The Design of Everyday Things", 2013, "Don Norman"),
    ("Sprint: How to Solve Big Problems and Test New Ideas in Just Five Days", 2016, "Jake Knapp"),
    ("Lean UX: Designing Great Products with Agile Teams", 2016, "Jeff Gothelf"),
    ("Hooked: How to Build Habit-Forming Products", 2014, "Nir Eyal"),
    ("Atomic Design", 2016, "Brad Frost"),
    ("Refactoring UI", 2018, "Adam Wathan & Steve Schoger"),
    ("Designing for Emotion", 2011, "Aaron Walter"),
    ("Just Enough Research", 2013, "Erika Hall"),
    ("Articulating Design Decisions", 2015, "Tom Greever"),
    ("Thinking with Type", 2010, "Ellen Lupton"),
    ("About Face: The Essentials of Interaction Design", 2014, "Alan Cooper"),
    ("Universal Principles of Design", 2010, "William Lidwell"),
    ("Rocket Surgery Made Easy", 2009, "Steve Krug"),
    ("Emotional Design: Why We Love (or Hate) Everyday Things", 2005, "Don Norman"),
    ("Make Time: How to Focus on What Matters Every Day", 2018, "Jake Knapp"),
    ("Lean vs Agile vs Design Thinking", 2017, "Jeff Gothelf"),
    ("Indistractable: How to Control Your Attention and Choose Your Life", 2019, "Nir Eyal"),
    ("Responsive Web Design", 2011, "Brad Frost"),
    ("Graphic Design: The New Basics", 2008, "Ellen Lupton"),
    ("The Inmates Are Running the Asylum", 2004, "Alan Cooper"),
    ("Universal Methods of Design", 2012, "William Lidwell"),
)


def seed_catalog(db: Session) -> tuple[int, int]:
    """Replace the whole catalog with the sample data; returns (authors, books)."""
    _ = db.execute(delete(Book))
    _ = db.execute(delete(Author))

    authors = {name: Author(name=name) for name in SEED_AUTHORS}
    db.add_all(authors.values())
    db.flush()  # ensure author ids

    db.add_all(
        Book(title=title, year=year, author_id=authors[author_name].id)
        for title, year, author_name in SEED_BOOKS
    )
    db.commit()
    return len(SEED_AUTHORS), len(SEED_BOOKS)


def main() -> None:
    setup_logging(settings.LOG_LEVEL)
    with SessionLocal() as db:
        n_authors, n_books = seed_catalog(db)
    logger.info("Seeded %d authors and %d books", n_authors, n_books)


if __name__ == "__main__":
    main()
