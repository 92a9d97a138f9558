"""
Shared utilities for the Bookstore service.
"""
