"""Farm weather records."""
