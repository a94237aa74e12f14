"""Adapters for external molecular toolkits."""
