"""Buffer-selection popup menu for text editors."""

__all__ = [
    "adapters",
    "config",
    "host",
    "menu",
    "runtime",
]

__version__ = "0.1.0"
