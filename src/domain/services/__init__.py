"""Domain services package."""

from .products import ProductListing, ProductService

__all__ = ["ProductListing", "ProductService"]
