"""
FastAPI RESTful API for the Bookstore service.

This module provides a small REST API for:
- Listing, reading, creating, updating and deleting books
- Auto-generated OpenAPI documentation with Swagger UI
"""
