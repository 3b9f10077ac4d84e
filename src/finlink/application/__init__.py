"""Application layer: read use cases orchestrating domain and repositories."""
