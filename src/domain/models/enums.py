"""Domain enumerations for the product catalog.

All string-valued enums use str mixin so they serialize cleanly to JSON
and remain comparable to plain strings (FastAPI / Pydantic default behaviour).
"""

from enum import Enum


class Comparator(str, Enum):
    """Comparison applied by a repository Filter to a single entity field."""

    EQ = "eq"
    NE = "ne"
    LT = "lt"
    LE = "le"
    GT = "gt"
    GE = "ge"
    IN = "in"
    BETWEEN = "between"
    CONTAINS = "contains"  # case-insensitive substring
    IS_NULL = "is_null"

    @property
    def is_range(self) -> bool:
        """True for comparators that order values (lt / le / gt / ge / between)."""
        return self in {
            Comparator.LT,
            Comparator.LE,
            Comparator.GT,
            Comparator.GE,
            Comparator.BETWEEN,
        }
