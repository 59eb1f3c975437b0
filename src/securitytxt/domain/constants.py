"""Constants for serving and locating security.txt files."""

# The conventional name of the file.
FILENAME = "security.txt"

# The path under which security.txt must be placed when served over HTTP.
WELL_KNOWN_PATH = "/.well-known/security.txt"

# The file must be served as plain text.
MIMETYPE = "text/plain"
