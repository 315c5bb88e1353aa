"""Catalog ORM models: products."""

from __future__ import annotations

from decimal import Decimal
from typing import Optional

from sqlalchemy import CheckConstraint, Integer, Numeric, String
from sqlalchemy.orm import Mapped, mapped_column

from src.infrastructure.database import Base


class Product(Base):
    """Catalog product row.

    product_id is generated by the database on insert.
    stock is indexed for the low-stock query; it is not constrained to be
    non-negative.
    """

    __tablename__ = "products"
    __table_args__ = (CheckConstraint("price >= 0", name="ck_products_price_non_negative"),)

    product_id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(64), nullable=False)
    price: Mapped[Decimal] = mapped_column(Numeric(12, 2), nullable=False)
    description: Mapped[Optional[str]] = mapped_column(String(256), nullable=True)
    stock: Mapped[int] = mapped_column(Integer, nullable=False, default=0, index=True)
