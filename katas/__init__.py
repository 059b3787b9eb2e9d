"""Small, self-contained programming exercises, one module each."""

__version__ = "0.1.0"