"""A movie rental store: movies, inventory, customers and transaction commands."""

__version__ = "0.1.0"
__all__ = ["catalog", "commands", "customer", "movies", "store"]