"""Boundary records and service functions used by the surrounding application."""
