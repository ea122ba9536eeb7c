"""Signal-based message receiving, its bit encoding, and small text and buffer helpers."""

__version__ = "0.1.0"