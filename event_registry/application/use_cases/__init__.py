"""Application use cases (orchestration over repositories and domain entities)."""
