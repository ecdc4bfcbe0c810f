"""Storage backends for profilegate."""
