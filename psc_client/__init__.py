"""Client and wire models for the train price search service."""
