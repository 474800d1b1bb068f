"""Advent of Code 2025 solutions for days one to five, and a runner that times them."""

__version__ = "0.1.0"