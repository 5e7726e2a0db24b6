"""Core domain layer: entities, interfaces and services."""
