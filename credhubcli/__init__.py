"""Client library for the CredHub API: credentials, permissions, interpolation and bulk files."""

__version__ = "0.1.0"
__all__ = ["__version__"]