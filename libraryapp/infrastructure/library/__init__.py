"""Library context infrastructure."""
