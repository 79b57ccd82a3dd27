"""Legal case management service."""
