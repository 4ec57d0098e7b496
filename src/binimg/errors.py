"""Exceptions raised by the binimg package."""

from __future__ import annotations


class BinImgError(Exception):
    """Base class for binimg errors."""


class ShortReadError(BinImgError):
    """Raised when a single read returns fewer bytes than the format requires."""

    def __init__(self, what: str, expected: int, actual: int):
        super().__init__(f"Short read of {what}: expected {expected} bytes, got {actual}")
        self.what = what
        self.expected = expected
        self.actual = actual


class ShortWriteError(BinImgError):
    """Raised when a write reports fewer bytes than were handed to it."""

    def __init__(self, expected: int, actual: int):
        super().__init__(f"Short write: expected {expected} bytes, wrote {actual}")
        self.expected = expected
        self.actual = actual


class InvalidHueError(BinImgError, ValueError):
    """Raised by strict packing when a hue is not one of the legal angles."""


class ConversionError(BinImgError):
    """Custom exception for conversion errors."""
