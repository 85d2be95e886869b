"""Domain layer: entities, protocols (ports) and validated types."""
