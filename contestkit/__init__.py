"""Solutions to classic programming-contest problems on strings, numbers, arrays, intervals, grids and graphs."""

__version__ = "0.1.0"