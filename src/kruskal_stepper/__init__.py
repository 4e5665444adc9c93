"""Step-wise Kruskal's algorithm simulator."""

__version__ = "0.1.0"
