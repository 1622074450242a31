"""
LMS Catalog API Package

Cataloging endpoints for the library-management system: Authors,
Publishers and the Books that reference them.

Package Structure:
- config.py: Application configuration using Pydantic Settings
- database.py: SQLAlchemy database connection and session management
- exceptions.py: Catalog error types (not found, transaction failure)
- main.py: FastAPI application factory and configuration
- dependencies.py: Dependency injection aliases
- models/: SQLAlchemy ORM models
- schemas/: Pydantic request/response schemas
- routers/: API route handlers
- services/: Catalog service (persistence operations)
"""

__version__ = "0.1.0"
