"""Small shared helpers: logging setup and time conversion."""
