"""Collaborator services used by the algorithms."""
