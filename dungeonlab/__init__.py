"""Cards, an integer stack, item trees, characters, hashing experiments and a room-based adventure."""

__version__ = "0.1.0"