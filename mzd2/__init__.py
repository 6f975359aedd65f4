"""Sparse 3-D storage, id counters, resource paths, view geometry and image helpers for a tile map editor."""

__version__ = "0.2.1"