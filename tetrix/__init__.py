"""A falling-blocks puzzle game built on pygame, with a plain and a NES-style variant."""

__version__ = "0.1.0"