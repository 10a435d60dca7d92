"""Document verification service."""
