# ABOUTME: SQL DDL and statements for the Lendery catalog store.
# ABOUTME: Defines the single books table that holds the whole catalog.

SCHEMA_V1 = """
-- Whole-catalog snapshot, rewritten on every save
CREATE TABLE books (
    id        INTEGER PRIMARY KEY,
    position  INTEGER NOT NULL,
    title     TEXT NOT NULL,
    author    TEXT NOT NULL,
    available INTEGER NOT NULL DEFAULT 1,
    borrower  TEXT NOT NULL DEFAULT '',
    due_date  TEXT
);
"""

INSERT_BOOK = (
    "INSERT INTO books (id, position, title, author, available, borrower, due_date) "
    "VALUES (:id, :position, :title, :author, :available, :borrower, :due_date)"
)

SELECT_BOOKS = "SELECT * FROM books ORDER BY position"
