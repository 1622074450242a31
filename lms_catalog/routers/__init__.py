"""
API Routers Package

FastAPI routers that handle the catalog endpoints.

Router Structure:
- authors.py: /authors, /author/{id}
- publishers.py: /publishers, /publisher/{id}
- books.py: /books, /book/{id}

Each router is imported and registered in main.py.
"""

from lms_catalog.routers.authors import router as authors_router
from lms_catalog.routers.books import router as books_router
from lms_catalog.routers.publishers import router as publishers_router

__all__ = [
    "authors_router",
    "books_router",
    "publishers_router",
]
