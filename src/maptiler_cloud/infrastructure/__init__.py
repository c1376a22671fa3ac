"""Infrastructure layer - HTTP transport."""
