"""Breadth- and depth-first search routines for undirected graphs and grids."""

__version__ = "0.1.0"
__all__ = ["components", "grid"]