"""Mortgage payment and affordability calculation utilities."""
