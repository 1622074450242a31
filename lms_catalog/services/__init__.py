"""
Services Package

Business logic kept separate from HTTP handling (routers), so it can be
reused and tested in isolation.

Current services:
- catalog.py: CatalogService, persistence operations for authors,
  publishers and books
"""

from lms_catalog.services.catalog import CatalogService

__all__ = ["CatalogService"]
