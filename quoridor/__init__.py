"""Quoridor against a minimax opponent, with a text view and a pygame window."""

__version__ = "0.1.0"