"""Classic algorithms on trees, linked lists, grids, graphs, arrays and strings."""

__version__ = "0.1.0"