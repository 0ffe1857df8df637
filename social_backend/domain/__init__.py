"""Domain layer: entities, repository contracts, errors and policies."""
