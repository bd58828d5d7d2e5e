"""Small personal utilities: 2D vector math and a terminal helper."""

__version__ = "0.1.0"
