"""fenview — parse, validate and display FEN chess positions."""

__version__ = "0.1.0"
