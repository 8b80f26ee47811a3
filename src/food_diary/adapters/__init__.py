"""Infrastructure adapters for persistence and AI clients."""
