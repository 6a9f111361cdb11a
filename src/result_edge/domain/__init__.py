"""Domain layer: protocols consumed by core value types and adapters."""
