"""Query filters accepted by Repository.get_list().

A Filter is a plain value (field, comparator, value) that a concrete
repository translates into its store's native query language.  Several
filters passed together are combined with AND.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, model_validator

from src.domain.models.enums import Comparator

# Values a range comparison cannot order against a column.
_UNORDERED = (bool, list, tuple, set, frozenset, dict)


class Filter(BaseModel):
    """A single comparison against one entity field."""

    model_config = ConfigDict(frozen=True)

    field: str = Field(min_length=1)
    comparator: Comparator
    value: Any = None

    @model_validator(mode="after")
    def _check_value_shape(self) -> Filter:
        op = self.comparator
        if op is Comparator.IN:
            if not isinstance(self.value, (list, tuple, set, frozenset)):
                raise ValueError("'in' filter requires a list, tuple or set of values")
        elif op is Comparator.BETWEEN:
            if not isinstance(self.value, (list, tuple)) or len(self.value) != 2:
                raise ValueError("'between' filter requires a (low, high) pair")
        elif op is Comparator.CONTAINS:
            if not isinstance(self.value, str):
                raise ValueError("'contains' filter requires a string value")
        elif op is Comparator.IS_NULL:
            if not isinstance(self.value, bool):
                raise ValueError("'is_null' filter requires a boolean value")
        elif self.value is None:
            raise ValueError(f"'{op.value}' filter requires a value; use is_null to match NULL")
        if op.is_range:
            bounds = self.value if op is Comparator.BETWEEN else (self.value,)
            if any(b is None or isinstance(b, _UNORDERED) for b in bounds):
                raise ValueError(f"'{op.value}' filter requires orderable values")
        return self

    @classmethod
    def where(cls, field: str, comparator: Comparator | str, value: Any = None) -> Filter:
        return cls(field=field, comparator=Comparator(comparator), value=value)

    @classmethod
    def between(cls, field: str, low: Any, high: Any) -> Filter:
        """Inclusive range filter: low <= field <= high."""
        return cls(field=field, comparator=Comparator.BETWEEN, value=(low, high))
