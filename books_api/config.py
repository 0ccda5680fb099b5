# books_api/config.py
"""
Fixed settings for the book registry service.

The service has no environment-driven configuration: host, port and the
seed collection are constants. They live here so that ``main`` and the
catalogue store read them from one place.
"""

from dataclasses import dataclass, field
from typing import Dict, List


def _default_seed() -> List[Dict[str, object]]:
    return [
        {"id": 1, "title": "The Hobbit", "author": "J.R.R. Tolkien"},
        {"id": 2, "title": "1984", "author": "George Orwell"},
        {"id": 3, "title": "Clean Code", "author": "Robert C. Martin"},
    ]


@dataclass(frozen=True)
class Settings:
    # Server
    host: str = "0.0.0.0"
    port: int = 3000
    # Host name used in the startup banner
    public_host: str = "localhost"

    # Logging
    log_format: str = "%(asctime)s %(levelname)s [%(name)s] %(message)s"

    # Books loaded into the registry when it is created
    seed_books: List[Dict[str, object]] = field(default_factory=_default_seed)

    @property
    def base_url(self) -> str:
        return f"http://{self.public_host}:{self.port}"


settings = Settings()
