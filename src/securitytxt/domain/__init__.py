"""Domain layer: security.txt fields, document and errors."""
