"""Core building blocks: configuration, enums, errors and Result types."""
