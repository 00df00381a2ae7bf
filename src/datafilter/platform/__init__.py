"""Infrastructure helpers: logging and filesystem access."""
