"""Core classification logic."""
