"""Identity context infrastructure."""
