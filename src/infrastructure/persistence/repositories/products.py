"""SQLAlchemy implementation of ProductRepository.

The generic CRUD operations are delegated to a SqlRepository[Product]; only
the low-stock query is written here.
"""

from __future__ import annotations

from typing import Any

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from src.domain.models.products import Product as DomainProduct
from src.domain.repositories.filters import Filter
from src.domain.repositories.products import ProductRepository
from src.infrastructure.persistence.models.catalog import Product as OrmProduct

from .base import EntityMapping, SqlRepository


class SqlProductRepository(ProductRepository):
    def __init__(self, session: AsyncSession, autocommit: bool = True) -> None:
        self._session = session
        self._crud: SqlRepository[DomainProduct] = SqlRepository(
            session, PRODUCT_MAPPING, autocommit=autocommit
        )

    @staticmethod
    def _to_domain(row: OrmProduct) -> DomainProduct:
        return DomainProduct(
            product_id=row.product_id,
            name=row.name,
            price=row.price,
            description=row.description,
            stock=row.stock,
        )

    @staticmethod
    def _to_values(entity: DomainProduct) -> dict[str, Any]:
        return {
            "name": entity.name,
            "price": entity.price,
            "description": entity.description,
            "stock": entity.stock,
        }

    async def get_by_id(self, id: int) -> DomainProduct | None:
        return await self._crud.get_by_id(id)

    async def get_all(self) -> list[DomainProduct]:
        return await self._crud.get_all()

    async def get_list(self, *filters: Filter, order_by: str | None = None) -> list[DomainProduct]:
        return await self._crud.get_list(*filters, order_by=order_by)

    async def add(self, entity: DomainProduct) -> DomainProduct:
        return await self._crud.add(entity)

    async def update(self, entity: DomainProduct) -> DomainProduct:
        return await self._crud.update(entity)

    async def delete(self, id: int) -> None:
        await self._crud.delete(id)

    async def get_low_stock(self, threshold: int) -> list[DomainProduct]:
        stmt = (
            select(OrmProduct)
            .where(OrmProduct.stock <= threshold)
            .order_by(OrmProduct.stock.asc(), OrmProduct.product_id.asc())
        )
        return await self._crud.fetch(stmt, "get_low_stock")


PRODUCT_MAPPING: EntityMapping[DomainProduct] = EntityMapping(
    name="Product",
    orm_model=OrmProduct,
    id_attribute="product_id",
    to_domain=SqlProductRepository._to_domain,
    to_values=SqlProductRepository._to_values,
)
