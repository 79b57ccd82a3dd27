"""Infrastructure package: database, persistence and security adapters."""
