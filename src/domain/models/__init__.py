"""Domain model package.

All domain objects are pure Python / Pydantic models with no ORM or
infrastructure dependencies.  Import from this package to avoid coupling
application code to individual module paths.
"""

from .enums import Comparator
from .products import Product

__all__ = [
    # enums
    "Comparator",
    # entities
    "Product",
]
