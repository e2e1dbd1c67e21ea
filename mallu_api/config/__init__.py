"""API configuration."""
