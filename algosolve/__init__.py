"""Solutions to classic algorithmic problems on arrays, strings, grids, graphs and trees."""

__version__ = "0.1.0"
__all__ = ["arrays", "graphs", "grids", "optimization", "text", "trees"]