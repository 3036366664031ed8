from typing import Final

# Sample data loaded into every seeded store, in insertion order.
SEED_AUTHORS: Final[tuple[str, ...]] = (
    "J. K. Rowling",
    "J. R. R. Tolkien",
    "Brent Weeks",
)

# (name, author_id)
SEED_BOOKS: Final[tuple[tuple[str, int], ...]] = (
    ("Harry Potter and the Chamber of Secrets", 1),
    ("Harry Potter and the Prisoner of Azkaban", 1),
    ("Harry Potter and the Goblet of Fire", 1),
    ("The Fellowship of the Ring", 2),
    ("The Two Towers", 2),
    ("The Return of the King", 2),
    ("The Way of Shadows", 3),
    ("Beyond the Shadows", 3),
)
