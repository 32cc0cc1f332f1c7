"""Services wrapping the outside world: shell, downloads, environment, directories."""
