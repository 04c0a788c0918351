"""Option records."""
