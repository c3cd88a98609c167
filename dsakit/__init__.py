"""Binary tree, graph, grid, recursion, sorting and text-pattern routines."""

__version__ = "0.1.0"