"""Infrastructure: security.txt parsing."""
