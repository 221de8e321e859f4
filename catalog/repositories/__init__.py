"""상품 저장소."""

from catalog.repositories.base import ProductRepository
from catalog.repositories.product_repository import SqlAlchemyProductRepository

__all__ = ["ProductRepository", "SqlAlchemyProductRepository"]
