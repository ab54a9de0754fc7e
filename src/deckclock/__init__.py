"""Deck Clock - seven-segment and analog clock faces for key-sized displays."""

__version__ = "0.1.0"
