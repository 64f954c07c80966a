"""Slot-based Military/Economy value calculator with synchronized Y cells."""
__version__ = "0.1.0"
