"""Library inventory, membership and lending."""

__version__ = "0.1.0"
