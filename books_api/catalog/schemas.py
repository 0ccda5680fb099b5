"""
Pydantic schema definitions for the catalog module.

``Book`` is the only record the registry stores. ``CreateBookRequest``
and ``UpdateBookRequest`` describe the JSON bodies accepted by the
write endpoints: both fields are optional at the schema level so that
presence checks happen in the registry and produce the service's own
400 messages rather than pydantic's 422 payload. ``DeletedBook`` wraps
the record returned by ``DELETE /books/{id}``.
"""

from typing import Any, Optional

from pydantic import BaseModel, field_validator


class Book(BaseModel):
    """A single book entry held by the registry."""

    id: int
    title: str
    author: str


def _coerce_text(value: Any) -> Optional[str]:
    """Loosely coerce a JSON scalar to text.

    ``None``, ``False``, zero, NaN and the empty string count as missing and
    become ``None``. Other numbers and ``True`` are converted to their
    text form. Objects and arrays are rejected.
    """
    if value is None or value is False or value == "":
        return None
    if isinstance(value, str):
        return value
    if isinstance(value, (bool, int, float)):
        # NaN is the only value not equal to itself
        if not value or value != value:
            return None
        if isinstance(value, bool):
            return "true"
        if isinstance(value, float) and value.is_integer():
            return str(int(value))
        return str(value)
    raise ValueError("title and author must be text")


class CreateBookRequest(BaseModel):
    title: Optional[str] = None
    author: Optional[str] = None

    @field_validator("title", "author", mode="before")
    @classmethod
    def _coerce(cls, value: Any) -> Optional[str]:
        return _coerce_text(value)


class UpdateBookRequest(BaseModel):
    # Fields left out keep their current value on the stored book.
    title: Optional[str] = None
    author: Optional[str] = None

    @field_validator("title", "author", mode="before")
    @classmethod
    def _coerce(cls, value: Any) -> Optional[str]:
        return _coerce_text(value)


class DeletedBook(BaseModel):
    message: str = "Book deleted"
    book: Book


class ErrorResponse(BaseModel):
    """Body of every 4xx response produced by the service."""

    error: str
