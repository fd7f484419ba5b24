"""Core models, services and exceptions."""
