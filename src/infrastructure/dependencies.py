"""Application-boundary factories for the service layer."""

from __future__ import annotations

from sqlalchemy.ext.asyncio import AsyncSession

from src.domain.services.products import ProductService
from src.infrastructure.database import settings
from src.infrastructure.persistence.repositories.products import SqlProductRepository


def get_product_service(session: AsyncSession) -> ProductService:
    """Build a ProductService over a commit-per-write product repository."""
    return ProductService(
        SqlProductRepository(session),
        low_stock_threshold=settings.low_stock_threshold,
    )
