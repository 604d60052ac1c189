"""A* path search on four-connected obstacle grids, with matplotlib plotting and a demo command."""

__version__ = "0.1.0"