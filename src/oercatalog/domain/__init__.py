"""Domain layer: entities, ports and the catalog build service."""
