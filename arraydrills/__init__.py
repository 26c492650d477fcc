"""Classic array and matrix algorithms in brute-force and efficient forms."""

__version__ = "0.1.0"