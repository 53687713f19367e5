"""View rendering through kida."""
