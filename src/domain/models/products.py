"""Product domain model.

Pure domain object with no ORM or persistence concerns.  Field constraints are
enforced by Pydantic at construction time, so an invalid product never
reaches a repository.
"""

from __future__ import annotations

from decimal import Decimal

from pydantic import BaseModel, ConfigDict, Field

NAME_MAX_LENGTH = 64
DESCRIPTION_MAX_LENGTH = 256


class Product(BaseModel):
    """A catalog product.

    product_id is None until the store assigns it on insert and never changes
    afterwards.  stock is non-negative by convention only; the store does not
    reject negative values.
    """

    model_config = ConfigDict(frozen=True)

    product_id: int | None = None
    name: str = Field(min_length=1, max_length=NAME_MAX_LENGTH)
    price: Decimal = Field(ge=0)
    description: str | None = Field(default=None, max_length=DESCRIPTION_MAX_LENGTH)
    stock: int = 0

    @classmethod
    def create(
        cls,
        name: str,
        price: Decimal | float | str,
        stock: int = 0,
        description: str | None = None,
    ) -> Product:
        """Named constructor for a new, unsaved product."""
        return cls(name=name, price=Decimal(str(price)), stock=stock, description=description)

    def with_id(self, product_id: int) -> Product:
        """Return a copy carrying the store-assigned identity."""
        return self.model_copy(update={"product_id": product_id})
