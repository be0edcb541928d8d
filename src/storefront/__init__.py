"""Storefront catalogue API: products, categories and search over MongoDB."""

__version__ = "0.1.0"
