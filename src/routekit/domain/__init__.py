"""Domain layer: route descriptor types, validation and protocols."""
