"""Logging setup for the composed application."""
