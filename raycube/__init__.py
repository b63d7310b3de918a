"""Raycasting engine that loads, checks and displays .cub scene files."""

__version__ = "0.1.0"