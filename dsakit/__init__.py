"""Algorithm toolkit: dynamic programming, grids, graphs and union-find."""

__version__ = "0.1.0"