"""HTTP API for the multi-calendar service."""
