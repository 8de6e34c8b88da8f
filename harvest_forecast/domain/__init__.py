"""Domain layer: entities, repositories and use cases."""
