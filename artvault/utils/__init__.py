"""Utility modules for the storefront."""
