"""Entity package: Product."""

from .entity import Product, ProductPage, SearchResult
from .repository import ProductRepository

__all__ = ["Product", "ProductPage", "ProductRepository", "SearchResult"]
