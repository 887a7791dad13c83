"""The store's inventory of movies, kept per genre."""

from __future__ import annotations

from typing import Iterator

from moviestore.movies import Movie

__all__ = ["MovieCatalog"]

_GENRE_ORDER = ("F", "D", "C")


class MovieCatalog:
    """Movies grouped by genre code, with comedies, dramas and classics in that order."""

    def __init__(self) -> None:
        self._shelves: dict[str, list[Movie]] = {genre: [] for genre in _GENRE_ORDER}

    def insert(self, movie: Movie) -> bool:
        """Add ``movie`` unless its genre is unknown or an equal movie is stocked."""
        shelf = self._shelves.get(movie.genre)
        if shelf is None or any(existing.matches(movie) for existing in shelf):
            return False
        shelf.append(movie)
        return True

    def find(self, key: Movie) -> Movie | None:
        """Return the stocked movie that matches ``key``, or None."""
        shelf = self._shelves.get(key.genre, [])
        return next((movie for movie in shelf if movie.matches(key)), None)

    def category(self, genre: str) -> list[Movie]:
        """Return the movies of one genre in insertion order."""
        try:
            return list(self._shelves[genre])
        except KeyError:
            raise ValueError("Invalid genre") from None

    def __iter__(self) -> Iterator[Movie]:
        for genre in _GENRE_ORDER:
            yield from self._shelves[genre]

    def __len__(self) -> int:
        return sum(len(shelf) for shelf in self._shelves.values())