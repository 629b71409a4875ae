"""Infrastructure layer: configuration, logging, persistence, external APIs."""
