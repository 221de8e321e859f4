"""
SqlAlchemyProductRepository - ProductRepository 구현체

SQLAlchemy asyncio 세션을 사용합니다. 호출마다 세션과 트랜잭션을 하나씩 열고,
작업이 취소되거나 실패하면 트랜잭션이 롤백되어 부분 쓰기가 남지 않습니다.
"""

import logging
from typing import Optional

from sqlalchemy import delete, select, update
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import async_sessionmaker

from catalog.core.exceptions import RepositoryError
from catalog.models import Product
from catalog.repositories.base import ProductRepository

logger = logging.getLogger(__name__)

# INTEGER 컬럼(signed 64-bit)이 표현할 수 있는 범위
MIN_ID = -(2**63)
MAX_ID = 2**63 - 1


def is_storable_id(product_id: int) -> bool:
    """컬럼 범위를 벗어난 ID는 저장될 수 없으므로 존재하지 않는 것으로 취급합니다."""
    return MIN_ID <= product_id <= MAX_ID


class SqlAlchemyProductRepository(ProductRepository):
    """ProductRepository 구현 (SQLAlchemy asyncio)"""

    def __init__(self, session_factory: async_sessionmaker):
        self.session_factory = session_factory

    async def create(self, product: Product) -> int:
        try:
            async with self.session_factory() as session:
                async with session.begin():
                    session.add(product)
                    await session.flush()
                    product_id = product.id
        except SQLAlchemyError as e:
            logger.exception("Error creating product %r", product.name)
            raise RepositoryError("create") from e

        return product_id

    async def get_all(self) -> list[Product]:
        try:
            async with self.session_factory() as session:
                result = await session.execute(select(Product).order_by(Product.id))
                return list(result.scalars().all())
        except SQLAlchemyError as e:
            logger.exception("Error retrieving products")
            raise RepositoryError("get_all") from e

    async def get_by_id(self, product_id: int) -> Optional[Product]:
        if not is_storable_id(product_id):
            return None

        try:
            async with self.session_factory() as session:
                return await session.get(Product, product_id)
        except SQLAlchemyError as e:
            logger.exception("Error retrieving product with ID %s", product_id)
            raise RepositoryError("get_by_id") from e

    async def update(self, product: Product) -> bool:
        if not is_storable_id(product.id):
            return False

        stmt = (
            update(Product)
            .where(Product.id == product.id)
            .values(
                name=product.name,
                description=product.description,
                price=product.price,
                updated_at=product.updated_at,
            )
        )
        try:
            async with self.session_factory() as session:
                async with session.begin():
                    result = await session.execute(stmt)
        except SQLAlchemyError as e:
            logger.exception("Error updating product with ID %s", product.id)
            raise RepositoryError("update") from e

        return result.rowcount > 0

    async def delete(self, product_id: int) -> bool:
        if not is_storable_id(product_id):
            return False

        try:
            async with self.session_factory() as session:
                async with session.begin():
                    result = await session.execute(
                        delete(Product).where(Product.id == product_id)
                    )
        except SQLAlchemyError as e:
            logger.exception("Error deleting product with ID %s", product_id)
            raise RepositoryError("delete") from e

        return result.rowcount > 0
