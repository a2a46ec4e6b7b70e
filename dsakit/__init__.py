"""Classic data structures and algorithms: sorting, heaps, graphs, trees, dynamic programming and more."""

__version__ = "0.1.0"