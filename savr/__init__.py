"""Savr: grocery inventory, expiry-aware recipe suggestions and weekly meal planning."""
__version__ = "0.1.0"
