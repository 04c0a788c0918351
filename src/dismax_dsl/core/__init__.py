"""Configuration and value formatting."""
