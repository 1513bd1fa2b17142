"""Library application layer."""
