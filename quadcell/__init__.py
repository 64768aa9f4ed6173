"""Quad-edge polyhedral cells, Euler operators and Wavefront OBJ input and output."""

__version__ = "0.1.0"
__all__ = ["cell", "cli", "edge", "euler", "face", "obj", "vertex"]