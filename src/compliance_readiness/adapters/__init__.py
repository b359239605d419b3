"""Adapters that turn scoring output into consumer-facing structures."""
