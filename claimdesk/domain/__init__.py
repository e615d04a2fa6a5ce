"""Domain layer: entities, enums and protocol ports (no framework imports)."""
