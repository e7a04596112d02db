"""Classic array, sorting and matrix algorithms, most in several variants."""

__version__ = "0.1.0"