"""Application services: storage, editor and changelog operations."""
