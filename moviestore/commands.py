"""Store transactions and the parser that builds them from command lines."""

from __future__ import annotations

import re
from abc import ABC, abstractmethod
from copy import copy as _shallow_copy
from dataclasses import dataclass, replace
from typing import Callable, ClassVar, Protocol

from moviestore.catalog import MovieCatalog
from moviestore.customer import Customer
from moviestore.movies import Classic, Comedy, Drama, Movie

__all__ = [
    "CommandError",
    "Command",
    "Borrow",
    "Return",
    "History",
    "InventoryCommand",
    "register_command",
    "parse_command",
]


class CommandError(ValueError):
    """Raised when a command line is malformed or a command cannot be carried out."""


class _Store(Protocol):
    inventory: MovieCatalog

    def get_customer(self, customer_id: int) -> Customer | None: ...


class Command(ABC):
    """A single store transaction read from the command file."""

    @abstractmethod
    def execute(self, store: _Store) -> str:
        """Carry out the command; return any text it shows, or an empty string."""

    @abstractmethod
    def describe(self) -> str:
        """Return a description of the command for a customer's history."""

    @abstractmethod
    def copy(self) -> Command:
        """Return an independent copy of the command."""

    def __str__(self) -> str:
        return self.describe()


_LEADING_INT = re.compile(r"\s*([+-]?\d+)")
_TRANSACTION = re.compile(r"\s*([+-]?\d+)\s*(\S)\s*(\S)(.*)", re.DOTALL)
_DVD = "D"


def _strip_leading(text: str) -> str:
    return text.lstrip(" \t")


def _comedy_key(rest: str) -> Movie:
    """Parse ``Title, Year`` into a comedy search key."""
    title, comma, after = rest.partition(",")
    match = _LEADING_INT.match(after) if comma else None
    if match is None:
        raise CommandError(f"ERROR: Malformed comedy movie: {rest.strip()}")
    director = after[match.end():].split(",", 1)[0]
    return Comedy(1, _strip_leading(director), _strip_leading(title), int(match.group(1)))


def _drama_key(rest: str) -> Movie:
    """Parse ``Director, Title,`` into a drama search key."""
    director, _, remainder = rest.partition(",")
    title = remainder.split(",", 1)[0]
    return Drama(1, _strip_leading(director), _strip_leading(title), 0)


def _classic_key(rest: str) -> Movie:
    """Parse ``Month Year ActorFirst ActorLast`` into a classic search key."""
    words = rest.split()
    if len(words) < 4:
        raise CommandError(f"ERROR: Malformed classic movie: {rest.strip()}")
    month_text, year_text, actor_first, actor_last = words[:4]
    try:
        month, year = int(month_text), int(year_text)
    except ValueError:
        raise CommandError(f"ERROR: Malformed classic movie: {rest.strip()}") from None
    return Classic(1, "", "", year, month=month, actor=f"{actor_first} {actor_last}")


_KEY_PARSERS: dict[str, Callable[[str], Movie]] = {
    Comedy.genre: _comedy_key,
    Drama.genre: _drama_key,
    Classic.genre: _classic_key,
}


@dataclass
class _MovieTransaction(Command):
    """A command that names a customer and a movie by its sort keys."""

    customer_id: int
    movie: Movie

    verb: ClassVar[str] = ""

    @classmethod
    def parse(cls, text: str) -> _MovieTransaction:
        """Build the command from ``CustomerID MediaType Genre <movie keys>``."""
        match = _TRANSACTION.match(text)
        if match is None:
            raise CommandError(f"ERROR: Malformed {cls.verb.lower()} command: {text}")
        customer_text, media, genre, rest = match.groups()
        if media != _DVD:
            raise CommandError(f"ERROR: Unsupported media type: {media}")
        key_parser = _KEY_PARSERS.get(genre)
        if key_parser is None:
            raise CommandError(f"ERROR: Unknown genre type: {genre}")
        return cls(int(customer_text), key_parser(rest))

    def describe(self) -> str:
        return (
            f"{self.verb} command for customer {self.customer_id}\n"
            f"{self.movie.describe()}"
        )

    def copy(self) -> _MovieTransaction:
        return replace(self, movie=_shallow_copy(self.movie))

    def _customer(self, store: _Store) -> Customer:
        customer = store.get_customer(self.customer_id)
        if customer is None:
            raise CommandError(
                f"{self.verb} failed: Invalid customer ID {self.customer_id}"
            )
        return customer


@dataclass
class Borrow(_MovieTransaction):
    """Take one copy of a movie out of stock for a customer."""

    verb: ClassVar[str] = "Borrow"

    def execute(self, store: _Store) -> str:
        actual = store.inventory.find(self.movie)
        if actual is None or not actual.decrease_stock():
            raise CommandError("Borrow failed: Movie not available or not found.")
        self._customer(store).add_to_history(self.copy())
        return ""


@dataclass
class Return(_MovieTransaction):
    """Put one copy of a movie back into stock for a customer."""

    verb: ClassVar[str] = "Return"

    def execute(self, store: _Store) -> str:
        actual = store.inventory.find(self.movie)
        if actual is None:
            raise CommandError("Return failed: Movie not found in inventory.")
        actual.increase_stock()
        self._customer(store).add_to_history(self.copy())
        return ""


@dataclass
class History(Command):
    """Show the transactions of one customer."""

    customer_id: int

    @classmethod
    def parse(cls, text: str) -> History:
        """Build the command from ``CustomerID``."""
        match = _LEADING_INT.match(text)
        if match is None:
            raise CommandError(f"ERROR: Malformed history command: {text}")
        return cls(int(match.group(1)))

    def execute(self, store: _Store) -> str:
        customer = store.get_customer(self.customer_id)
        if customer is None:
            raise CommandError("History failed: Customer not found.")
        return customer.history_report()

    def describe(self) -> str:
        return "History command"

    def copy(self) -> History:
        return History(self.customer_id)


@dataclass
class InventoryCommand(Command):
    """Show every movie in stock: comedies, then dramas, then classics."""

    def execute(self, store: _Store) -> str:
        return "\n".join(movie.describe() for movie in store.inventory)

    def describe(self) -> str:
        return "Inventory command"

    def copy(self) -> InventoryCommand:
        return InventoryCommand()


CommandParser = Callable[[str], Command]

_PARSERS: dict[str, CommandParser] = {}


def register_command(code: str, parser: CommandParser) -> None:
    """Register ``parser`` to build commands whose lines start with ``code``."""
    _PARSERS[code] = parser


def parse_command(line: str) -> Command:
    """Build a command from one line of the command file."""
    if len(line) < 3:
        raise CommandError(f'ERROR: Malformed command line: "{line}"')
    code = line[0]
    parser = _PARSERS.get(code)
    if parser is None:
        raise CommandError(f"ERROR: Unknown command type: {code}")
    return parser(line[2:])


register_command("B", Borrow.parse)
register_command("R", Return.parse)
register_command("H", History.parse)
register_command("I", lambda _text: InventoryCommand())