"""Task manager REST API."""
