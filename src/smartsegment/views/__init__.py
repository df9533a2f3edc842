"""Application views."""
