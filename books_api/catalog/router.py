"""
Route definitions for the catalogue API.

Endpoints:
- GET    /books            : list every book
- GET    /books/{book_id}  : get one book
- POST   /books            : create a book from ``{title, author}``
- PUT    /books/{book_id}  : update ``title`` and/or ``author``
- DELETE /books/{book_id}  : remove a book

The registry is looked up on ``app.state`` through ``get_registry`` so
that each application instance owns its own collection. Registry
errors are turned into ``HTTPException`` here; ``main`` renders them as
``{"error": ...}`` bodies.
"""

from __future__ import annotations

import math
import re
from typing import List, Optional

from fastapi import APIRouter, Body, Depends, HTTPException, Request

from .schemas import Book, CreateBookRequest, DeletedBook, ErrorResponse, UpdateBookRequest
from .store import (
    NOT_FOUND_MESSAGE,
    BookNotFoundError,
    BookRegistry,
    BookValidationError,
)


router = APIRouter(tags=["catalog"])

# Unsigned hex, octal and binary literals (0x2, 0o2, 0b10)
_RADIX_LITERAL = re.compile(r"0[xXoObB][0-9a-fA-F]+")

NOT_FOUND_RESPONSE = {404: {"model": ErrorResponse, "description": "Book not found"}}
BAD_REQUEST_RESPONSE = {400: {"model": ErrorResponse, "description": "Missing or empty fields"}}


def get_registry(request: Request) -> BookRegistry:
    return request.app.state.registry


def _parse_book_id(raw: str) -> Optional[int]:
    """Read a path segment the way a numeric cast would.

    Integral numeric text (``"2"``, ``" 2 "``, ``"2.0"``, ``"2e0"``) and
    unsigned radix literals (``"0x2"``, ``"0o2"``, ``"0b10"``) give the
    integer; anything else gives ``None``, which matches no book.
    """
    text = raw.strip()
    if _RADIX_LITERAL.fullmatch(text):
        try:
            return int(text, 0)
        except ValueError:
            return None
    if "_" in raw:
        # float() accepts digit separators, a numeric cast does not
        return None
    try:
        value = float(text)
    except ValueError:
        return None
    if not math.isfinite(value) or not value.is_integer():
        return None
    return int(value)


def _require_book_id(raw: str) -> int:
    book_id = _parse_book_id(raw)
    if book_id is None:
        raise HTTPException(status_code=404, detail=NOT_FOUND_MESSAGE)
    return book_id


@router.get("/books", response_model=List[Book])
def list_books(registry: BookRegistry = Depends(get_registry)) -> List[Book]:
    return registry.list_books()


@router.get("/books/{book_id}", response_model=Book, responses=NOT_FOUND_RESPONSE)
def get_book(book_id: str, registry: BookRegistry = Depends(get_registry)) -> Book:
    try:
        return registry.get_book(_require_book_id(book_id))
    except BookNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))


@router.post("/books", response_model=Book, status_code=201, responses=BAD_REQUEST_RESPONSE)
def create_book(
    req: Optional[CreateBookRequest] = Body(default=None),
    registry: BookRegistry = Depends(get_registry),
) -> Book:
    req = req or CreateBookRequest()
    try:
        return registry.create_book(req.title, req.author)
    except BookValidationError as e:
        raise HTTPException(status_code=400, detail=str(e))


@router.put(
    "/books/{book_id}",
    response_model=Book,
    responses={**NOT_FOUND_RESPONSE, **BAD_REQUEST_RESPONSE},
)
def update_book(
    book_id: str,
    req: Optional[UpdateBookRequest] = Body(default=None),
    registry: BookRegistry = Depends(get_registry),
) -> Book:
    req = req or UpdateBookRequest()
    try:
        return registry.update_book(_require_book_id(book_id), title=req.title, author=req.author)
    except BookNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except BookValidationError as e:
        raise HTTPException(status_code=400, detail=str(e))


@router.delete("/books/{book_id}", response_model=DeletedBook, responses=NOT_FOUND_RESPONSE)
def delete_book(book_id: str, registry: BookRegistry = Depends(get_registry)) -> DeletedBook:
    try:
        removed = registry.delete_book(_require_book_id(book_id))
    except BookNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    return DeletedBook(book=removed)
