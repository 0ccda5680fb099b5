"""
Catalog package for the book registry API.

This package holds the pydantic schemas, the in-memory ``BookRegistry``
and the route definitions exposing create/read/update/delete over the
collection. ``main.create_app`` mounts ``catalog_router`` and attaches a
registry to ``app.state``.
"""

from .router import router as catalog_router  # noqa: F401
from .store import BookRegistry  # noqa: F401
