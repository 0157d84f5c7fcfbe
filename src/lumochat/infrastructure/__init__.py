"""Infrastructure layer: concrete adapters for application ports."""
