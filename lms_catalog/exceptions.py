"""
Catalog Exceptions

Two failure kinds reach the HTTP layer:

- RetrieveError: a required entity could not be found (404)
- TransactionError: the persistence layer failed (500)

Both are mapped to JSON responses by the exception handlers registered
in main.py.
"""


class CatalogError(Exception):
    """Base class for catalog failures."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class RetrieveError(CatalogError):
    """
    A requested or referenced entity does not exist.

    The message is returned to the client, e.g. "Author not found".
    """


class TransactionError(CatalogError):
    """
    A database operation failed.

    Raised by CatalogService with the underlying SQLAlchemyError chained
    as __cause__. The message is logged but never returned to the client.
    """
