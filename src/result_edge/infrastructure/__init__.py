"""Infrastructure adapters (logging backends)."""
