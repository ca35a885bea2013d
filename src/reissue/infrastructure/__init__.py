"""Infrastructure helpers - logging."""
