"""
FastAPI main application for the Bookstore API.
"""

from contextlib import asynccontextmanager
from datetime import datetime, timezone
from typing import List

import structlog
from fastapi import Depends, FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException

from api.config import config as api_config
from api.models import Book, BookCreate, BookUpdate, ErrorResponse, HealthResponse
from api.store import BookNotFoundError, BookStore

# Setup logging
logger = structlog.get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan manager."""
    # Startup
    app.state.book_store = BookStore.with_seed_books()
    logger.info(
        "Server started",
        url=api_config.get_base_url(),
        books_count=app.state.book_store.count()
    )
    
    yield
    
    # Shutdown
    logger.info("Shutting down Bookstore API")


def get_book_store(request: Request) -> BookStore:
    """Dependency returning the store owned by the running application."""
    return request.app.state.book_store


# Create FastAPI application
app = FastAPI(
    title=api_config.api_title,
    description="""
    A simple REST API for managing a bookstore's catalog.
    
    ## Features
    
    * **Books**: List, read, add, update and remove books
    * **Partial updates**: `PUT /books/{id}` only changes the fields you send
    
    Books are held in memory and reset to the two default records on restart.
    """,
    version=api_config.api_version,
    docs_url=api_config.docs_url,
    openapi_url=api_config.openapi_url,
    lifespan=lifespan
)

# Add CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=api_config.cors_origins,
    allow_credentials=api_config.cors_allow_credentials,
    allow_methods=api_config.cors_allow_methods,
    allow_headers=api_config.cors_allow_headers,
)


# Exception handlers
@app.exception_handler(BookNotFoundError)
async def book_not_found_handler(request: Request, exc: BookNotFoundError):
    """Map missing books to 404."""
    return JSONResponse(
        status_code=status.HTTP_404_NOT_FOUND,
        content=ErrorResponse(
            error="Book not found",
            detail=str(exc),
            status_code=status.HTTP_404_NOT_FOUND
        ).model_dump()
    )


@app.exception_handler(HTTPException)
async def http_exception_handler(request: Request, exc: HTTPException):
    """Handle HTTP exceptions."""
    return JSONResponse(
        status_code=exc.status_code,
        content=ErrorResponse(
            error=str(exc.detail),
            status_code=exc.status_code
        ).model_dump(),
        headers=exc.headers
    )


@app.exception_handler(Exception)
async def general_exception_handler(request: Request, exc: Exception):
    """Handle general exceptions."""
    logger.error("Unhandled exception", error=str(exc), path=request.url.path)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=ErrorResponse(
            error="Internal server error",
            detail=str(exc) if api_config.debug else None,
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR
        ).model_dump()
    )


NOT_FOUND_RESPONSE = {404: {"model": ErrorResponse, "description": "Book not found"}}


# Health check endpoint
@app.get("/health", response_model=HealthResponse, tags=["Health"])
async def health_check(store: BookStore = Depends(get_book_store)):
    """Health check endpoint."""
    return HealthResponse(
        status="healthy",
        timestamp=datetime.now(timezone.utc),
        version=api_config.api_version,
        books_count=store.count()
    )


# Books endpoints
@app.get(
    "/books",
    response_model=List[Book],
    tags=["Books"],
    summary="Get all books"
)
async def list_books(store: BookStore = Depends(get_book_store)):
    """Retrieve a list of all books available in the store."""
    return store.list_books()


@app.get(
    "/books/{book_id}",
    response_model=Book,
    responses=NOT_FOUND_RESPONSE,
    tags=["Books"],
    summary="Get a book by ID"
)
async def get_book(book_id: str, store: BookStore = Depends(get_book_store)):
    """Retrieve details of a book by its unique ID."""
    return store.get_book(book_id)


@app.post(
    "/books",
    response_model=Book,
    status_code=status.HTTP_201_CREATED,
    tags=["Books"],
    summary="Add a new book"
)
async def create_book(book: BookCreate, store: BookStore = Depends(get_book_store)):
    """
    Add a new book to the bookstore.
    
    The book's `id` is assigned by the server.
    """
    return store.create_book(book)


@app.put(
    "/books/{book_id}",
    response_model=Book,
    responses=NOT_FOUND_RESPONSE,
    tags=["Books"],
    summary="Update a book by ID"
)
async def update_book(
    book_id: str,
    book: BookUpdate,
    store: BookStore = Depends(get_book_store)
):
    """
    Update the details of an existing book by its ID.
    
    Only the fields present in the body are changed; the `id` cannot be changed.
    """
    return store.update_book(book_id, book)


@app.delete(
    "/books/{book_id}",
    response_model=Book,
    responses=NOT_FOUND_RESPONSE,
    tags=["Books"],
    summary="Delete a book by ID"
)
async def delete_book(book_id: str, store: BookStore = Depends(get_book_store)):
    """Remove a book from the bookstore by its ID and return it."""
    return store.delete_book(book_id)
