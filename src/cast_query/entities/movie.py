"""Movie metadata placeholder."""

from typing import Any

UNKNOWN_MOVIE: dict[str, Any] = {
    "title": "Unknown Title",
    "genreIds": [],
    "overview": "No overview available",
}


def unknown_movie() -> dict[str, Any]:
    """Return a fresh copy of the placeholder used when no movie record exists."""
    return {**UNKNOWN_MOVIE, "genreIds": []}
