"""Algorithm exceptions."""
