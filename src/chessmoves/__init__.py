"""Chess movement legality: board geometry and per-piece movement rules."""

__version__ = "0.1.0"
