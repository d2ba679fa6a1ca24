"""Infrastructure layer for trackvault."""
