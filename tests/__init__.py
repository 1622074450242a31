"""
Test Suite for the LMS Catalog API

Test Organization:
- conftest.py: Shared fixtures (test database, client, sample data)
- test_authors.py: /authors and /author/{id} endpoints
- test_publishers.py: /publishers and /publisher/{id} endpoints
- test_books.py: /books and /book/{id} endpoints, reference resolution
- test_catalog_service.py: CatalogService against the test database
- test_errors.py: error mapping and persistence failures
- test_config.py: Settings validation

Running Tests:
    pytest
    pytest tests/test_books.py
    pytest -v
"""
