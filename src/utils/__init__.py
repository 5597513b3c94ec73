"""Logging, configuration and error helpers shared by handlers."""
