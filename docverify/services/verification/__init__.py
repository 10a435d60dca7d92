"""Document verification: extraction, classification and persistence."""
