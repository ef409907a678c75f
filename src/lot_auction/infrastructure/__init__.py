"""Infrastructure layer: configuration loading and auction factories."""
