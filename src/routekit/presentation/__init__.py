"""Presentation layer: FastAPI route registration."""
