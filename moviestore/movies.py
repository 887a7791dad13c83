"""Movie types held by the store and the parsers that build them from data lines."""

from __future__ import annotations

import re
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Callable, ClassVar

__all__ = [
    "MovieParseError",
    "Movie",
    "Comedy",
    "Drama",
    "Classic",
    "register_genre",
    "parse_movie",
]


class MovieParseError(ValueError):
    """Raised when a movie data line cannot be turned into a movie."""


_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


def _leading_int(text: str) -> int:
    """Read an integer at the start of ``text``, skipping leading whitespace."""
    match = _LEADING_INT.match(text)
    if match is None:
        raise MovieParseError(f"expected a number in {text!r}")
    return int(match.group(1))


@dataclass(eq=False)
class Movie(ABC):
    """A title in the store's inventory with a count of copies on the shelf."""

    stock: int
    director: str
    title: str
    year: int

    genre: ClassVar[str] = ""

    def increase_stock(self) -> None:
        """Put one copy back on the shelf."""
        self.stock += 1

    def decrease_stock(self) -> bool:
        """Take one copy off the shelf; return False if none are left."""
        if self.stock > 0:
            self.stock -= 1
            return True
        return False

    @abstractmethod
    def describe(self) -> str:
        """Return the one-line inventory listing of this movie."""

    @abstractmethod
    def matches(self, other: Movie) -> bool:
        """Return True if ``other`` is the same movie by this genre's sort keys."""

    @abstractmethod
    def __lt__(self, other: Movie) -> bool:
        """Order movies of the same genre by that genre's sort keys."""

    def __str__(self) -> str:
        return self.describe()


@dataclass(eq=False)
class Comedy(Movie):
    """A comedy, identified and sorted by title, then year."""

    genre: ClassVar[str] = "F"

    def describe(self) -> str:
        return f"{self.title}, {self.year}, {self.director} ({self.stock}) - Comedy"

    def matches(self, other: Movie) -> bool:
        return (
            isinstance(other, Comedy)
            and self.title == other.title
            and self.year == other.year
        )

    def __lt__(self, other: Movie) -> bool:
        if not isinstance(other, Movie):
            return NotImplemented
        if not isinstance(other, Comedy):
            return False
        return (self.title, self.year) < (other.title, other.year)


@dataclass(eq=False)
class Drama(Movie):
    """A drama, identified and sorted by director, then title."""

    genre: ClassVar[str] = "D"

    def describe(self) -> str:
        return f"{self.director}, {self.title}, {self.year} ({self.stock}) - Drama"

    def matches(self, other: Movie) -> bool:
        return (
            isinstance(other, Drama)
            and self.director == other.director
            and self.title == other.title
        )

    def __lt__(self, other: Movie) -> bool:
        if not isinstance(other, Movie):
            return NotImplemented
        if not isinstance(other, Drama):
            return False
        return (self.director, self.title) < (other.director, other.title)


@dataclass(eq=False)
class Classic(Movie):
    """A classic, identified and sorted by release year, month, then major actor."""

    month: int = 0
    actor: str = ""

    genre: ClassVar[str] = "C"

    def describe(self) -> str:
        return (
            f"{self.year} {self.month}, {self.actor}, {self.director}, "
            f"{self.title} ({self.stock}) - Classics"
        )

    def matches(self, other: Movie) -> bool:
        return (
            isinstance(other, Classic)
            and self.year == other.year
            and self.month == other.month
            and self.actor == other.actor
        )

    def __lt__(self, other: Movie) -> bool:
        if not isinstance(other, Movie):
            return NotImplemented
        if not isinstance(other, Classic):
            return False
        return (self.year, self.month, self.actor) < (
            other.year,
            other.month,
            other.actor,
        )


MovieParser = Callable[[str], Movie]

_PARSERS: dict[str, MovieParser] = {}


def register_genre(genre: str, parser: MovieParser) -> None:
    """Register ``parser`` as the builder of movies for the genre code ``genre``."""
    _PARSERS[genre] = parser


def parse_movie(genre: str, data: str) -> Movie:
    """Build a movie of ``genre`` from the data that follows the genre code."""
    parser = _PARSERS.get(genre)
    if parser is None:
        raise MovieParseError(f"Unknown movie type: {genre}, discarding line: {data}")
    return parser(data)


def _split_common(data: str) -> tuple[int, str, str, str]:
    """Split ``stock, director, title, rest`` and drop the space after each comma."""
    parts = data.split(",", 3)
    if len(parts) < 4:
        raise MovieParseError(f"too few fields in movie line: {data}")
    stock_text, director, title, rest = parts
    return _leading_int(stock_text), director[1:], title[1:], rest


def _parse_comedy(data: str) -> Movie:
    tokens = [token.strip(" ") for token in data.split(",")]
    if len(tokens) < 4:
        raise MovieParseError(f"Comedy parsing failed: {data}")
    try:
        stock = _leading_int(tokens[0])
        year = _leading_int(tokens[3])
    except MovieParseError as exc:
        raise MovieParseError(f"Comedy parse error: {data}") from exc
    return Comedy(stock, tokens[1], tokens[2], year)


def _parse_drama(data: str) -> Movie:
    stock, director, title, rest = _split_common(data)
    return Drama(stock, director, title, _leading_int(rest))


def _parse_classic(data: str) -> Movie:
    stock, director, title, rest = _split_common(data)
    words = rest.split()
    if len(words) < 4:
        raise MovieParseError(f"Classic parsing failed: {data}")
    actor_first, actor_last, month_text, year_text = words[:4]
    return Classic(
        stock,
        director,
        title,
        _leading_int(year_text),
        month=_leading_int(month_text),
        actor=f"{actor_first} {actor_last}",
    )


register_genre(Comedy.genre, _parse_comedy)
register_genre(Drama.genre, _parse_drama)
register_genre(Classic.genre, _parse_classic)