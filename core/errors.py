# src/core/errors.py
"""Exceptions raised by the ELF analysis framework."""


class InvalidInputError(ValueError):
    """Raised when analysis inputs are malformed or inconsistent.

    Covers non-numeric tokens, mismatched array lengths, non-positive
    factors and malformed interpolation tables.
    """


class DegenerateGeometryError(ValueError):
    """Raised when the structure has no height to distribute forces over."""
