"""Store customers and their transaction history."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Protocol

__all__ = ["Customer"]

_RULE = "=========================="


class _Describable(Protocol):
    def describe(self) -> str: ...


@dataclass
class Customer:
    """A customer with an id, a name and the transactions they have made."""

    customer_id: int
    last_name: str
    first_name: str
    history: list[_Describable] = field(default_factory=list)

    def add_to_history(self, command: _Describable) -> None:
        """Record a transaction at the end of the history."""
        self.history.append(command)

    def history_report(self) -> str:
        """Return the customer's history as printable text, oldest first."""
        lines = [
            _RULE,
            f"History for {self.customer_id} {self.last_name} {self.first_name}:",
        ]
        if self.history:
            lines.extend(command.describe() for command in self.history)
        else:
            lines.append(f"No history for {self.full_name()}")
        return "\n".join(lines)

    def full_name(self) -> str:
        """Return the first name followed by the last name."""
        return f"{self.first_name} {self.last_name}"