"""Application layer - use cases over domain models."""
