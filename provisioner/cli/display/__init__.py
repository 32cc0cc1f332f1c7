"""Display helpers for the command-line interface."""
