"""Dataset model exceptions."""
