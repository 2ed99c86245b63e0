"""Vectors, collision volumes, characters and boss attacks for a small 3D arena game."""

__version__ = "0.1.0"