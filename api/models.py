"""
API models and schemas for the FastAPI application.
"""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class BookBase(BaseModel):
    """Client-supplied book fields."""
    title: str = Field(..., description="The title of the book")
    author: str = Field(..., description="The author of the book")
    publishedDate: str = Field(..., description="The publication date of the book")
    isbn: str = Field(..., description="The ISBN number of the book")


class Book(BookBase):
    """Book record as stored and returned by the API."""
    id: str = Field(..., description="The unique identifier of the book")

    model_config = ConfigDict(
        frozen=True,
        json_schema_extra={
            "example": {
                "id": "1",
                "title": "1984",
                "author": "George Orwell",
                "publishedDate": "1949-06-08",
                "isbn": "9780451524935",
            }
        }
    )


class BookCreate(BookBase):
    """Request body for adding a book. The id is assigned by the server."""

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "title": "Dune",
                "author": "Frank Herbert",
                "publishedDate": "1965-08-01",
                "isbn": "9780441172719",
            }
        }
    )


class BookUpdate(BaseModel):
    """Request body for updating a book. Omitted fields keep their current values."""
    title: Optional[str] = Field(None, description="The title of the book")
    author: Optional[str] = Field(None, description="The author of the book")
    publishedDate: Optional[str] = Field(None, description="The publication date of the book")
    isbn: Optional[str] = Field(None, description="The ISBN number of the book")

    model_config = ConfigDict(
        json_schema_extra={"example": {"title": "Nineteen Eighty-Four"}}
    )

    def changes(self) -> dict:
        """Fields explicitly provided with a non-null value."""
        return self.model_dump(exclude_unset=True, exclude_none=True)


class ErrorResponse(BaseModel):
    """Error response model."""
    error: str = Field(..., description="Error message")
    detail: Optional[str] = Field(None, description="Additional error details")
    status_code: int = Field(..., description="HTTP status code")


class HealthResponse(BaseModel):
    """Health check response model."""
    status: str = Field(..., description="Service status")
    timestamp: datetime = Field(..., description="Current timestamp")
    version: str = Field(..., description="API version")
    books_count: int = Field(..., description="Number of books currently held")
