"""The store: customers, inventory, and the loaders and command runner over them."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import TextIO, Union

from moviestore.catalog import MovieCatalog
from moviestore.commands import CommandError, parse_command
from moviestore.customer import Customer
from moviestore.movies import MovieParseError, parse_movie

__all__ = ["StoreManager", "main"]

PathLike = Union[str, Path]


class StoreManager:
    """Holds the inventory and the customers, and runs commands against them."""

    def __init__(self, out: TextIO | None = None) -> None:
        self.inventory = MovieCatalog()
        self.customers: dict[int, Customer] = {}
        self._out = out

    def _emit(self, text: str) -> None:
        print(text, file=self._out if self._out is not None else sys.stdout)

    def load_customers(self, path: PathLike) -> int:
        """Read ``ID LastName FirstName`` records; return how many were loaded."""
        tokens = Path(path).read_text().split()
        loaded = 0
        for id_text, last_name, first_name in zip(*[iter(tokens)] * 3):
            try:
                customer_id = int(id_text)
            except ValueError:
                break
            self.customers[customer_id] = Customer(customer_id, last_name, first_name)
            loaded += 1
        return loaded

    def load_movies(self, path: PathLike) -> int:
        """Read ``Genre, data`` lines into the inventory; return how many were added."""
        added = 0
        with open(path) as file:
            for raw in file:
                line = raw.rstrip("\r\n")
                if not line:
                    continue
                if len(line) > 2 and line[1] == ",":
                    try:
                        movie = parse_movie(line[0], line[2:])
                    except MovieParseError as exc:
                        print(exc, file=sys.stderr)
                        continue
                    if self.inventory.insert(movie):
                        added += 1
                else:
                    self._emit(f"Invalid movie line: {line}")
        return added

    def process_commands(self, path: PathLike) -> None:
        """Run every command in the file, showing output and errors as they occur."""
        with open(path) as file:
            for raw in file:
                line = raw.rstrip("\r\n")
                try:
                    command = parse_command(line)
                except CommandError as exc:
                    self._emit(str(exc))
                    print(f"Failed to execute command: {line}", file=sys.stderr)
                    continue
                try:
                    output = command.execute(self)
                except CommandError as exc:
                    self._emit(str(exc))
                    continue
                if output:
                    self._emit(output)

    def get_customer(self, customer_id: int) -> Customer | None:
        """Return the customer with ``customer_id``, or None."""
        return self.customers.get(customer_id)


def main(argv: list[str] | None = None) -> int:
    """Load the customer and movie files, then run the command file."""
    parser = argparse.ArgumentParser(
        prog="moviestore", description="Run a movie store's transactions."
    )
    parser.add_argument("customers", nargs="?", default="data4customers.txt")
    parser.add_argument("movies", nargs="?", default="data4movies.txt")
    parser.add_argument("commands", nargs="?", default="data4commands.txt")
    args = parser.parse_args(argv)

    store = StoreManager()
    steps = (
        (store.load_customers, args.customers, "Customers loaded."),
        (store.load_movies, args.movies, "Movies loaded."),
        (store.process_commands, args.commands, "Commands processed."),
    )
    status = 0
    for step, path, message in steps:
        try:
            step(path)
        except OSError:
            print(f"Could not open {path}", file=sys.stderr)
            status = 1
            continue
        print(message)
    print("Done.")
    return status


if __name__ == "__main__":
    raise SystemExit(main())