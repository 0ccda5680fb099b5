"""Books API: an in-memory book registry served over HTTP with FastAPI."""
