"""Transfer a markdown bullet and everything nested under it into a note."""

__version__ = "0.1.0"
