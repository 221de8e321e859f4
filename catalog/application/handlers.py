"""
요청 핸들러

작업마다 하나의 핸들러가 있으며, 저장소 포트를 생성 시점에 주입받습니다.
핸들러는 호출 간 상태를 갖지 않으므로 동시에 재사용해도 안전합니다.
저장소 예외는 잡지 않고 그대로 전파합니다.
"""

import asyncio
from abc import ABC, abstractmethod
from datetime import datetime, timezone
from typing import Generic, Optional, TypeVar

from catalog.application.requests import (
    CreateProduct,
    DeleteProduct,
    GetAllProducts,
    GetProductById,
    Request,
    UpdateProduct,
)
from catalog.core.result import Result
from catalog.models import Product
from catalog.repositories.base import ProductRepository

TRequest = TypeVar("TRequest", bound=Request)
TResponse = TypeVar("TResponse")


def not_found_message(product_id: int) -> str:
    return f"Product with ID {product_id} not found."


def utc_now() -> datetime:
    """현재 UTC 시각 (DateTime 컬럼에는 tzinfo 없이 UTC로 저장)"""
    return datetime.now(timezone.utc).replace(tzinfo=None)


def raise_if_cancelled(cancel_event: Optional[asyncio.Event]) -> None:
    """취소 신호가 설정되어 있으면 변경 작업 전에 중단합니다."""
    if cancel_event is not None and cancel_event.is_set():
        raise asyncio.CancelledError()


class RequestHandler(ABC, Generic[TRequest, TResponse]):
    """요청 핸들러 기반 클래스"""

    def __init__(self, repository: ProductRepository):
        self.repository = repository

    @abstractmethod
    async def handle(
        self, request: TRequest, cancel_event: Optional[asyncio.Event] = None
    ) -> TResponse:
        """요청을 처리하고 결과를 반환합니다."""
        raise NotImplementedError


class CreateProductHandler(RequestHandler[CreateProduct, int]):
    """상품 생성 핸들러"""

    async def handle(
        self, request: CreateProduct, cancel_event: Optional[asyncio.Event] = None
    ) -> int:
        """
        상품을 생성하고 새 ID를 반환합니다.

        생성 실패는 Result로 모델링하지 않습니다.
        저장소가 거부하면 RepositoryError가 그대로 전파됩니다.
        """
        product = Product(
            name=request.name,
            description=request.description,
            price=request.price,
            stock=request.stock,
            created_at=utc_now(),
        )

        raise_if_cancelled(cancel_event)
        return await self.repository.create(product)


class GetAllProductsHandler(RequestHandler[GetAllProducts, list[Product]]):
    """전체 상품 조회 핸들러"""

    async def handle(
        self, request: GetAllProducts, cancel_event: Optional[asyncio.Event] = None
    ) -> list[Product]:
        return await self.repository.get_all()


class GetProductByIdHandler(RequestHandler[GetProductById, Result[Product]]):
    """상품 단건 조회 핸들러"""

    async def handle(
        self, request: GetProductById, cancel_event: Optional[asyncio.Event] = None
    ) -> Result[Product]:
        product = await self.repository.get_by_id(request.id)

        if product is None:
            return Result.failure(not_found_message(request.id))

        return Result.success(product)


class UpdateProductHandler(RequestHandler[UpdateProduct, Result[None]]):
    """상품 수정 핸들러"""

    async def handle(
        self, request: UpdateProduct, cancel_event: Optional[asyncio.Event] = None
    ) -> Result[None]:
        """
        상품의 이름, 설명, 가격을 수정합니다.

        재고와 생성 일시는 변경하지 않습니다.
        """
        product = Product(
            id=request.id,
            name=request.name,
            description=request.description,
            price=request.price,
            updated_at=utc_now(),
        )

        raise_if_cancelled(cancel_event)
        updated = await self.repository.update(product)

        if not updated:
            return Result.failure(not_found_message(request.id))

        return Result.success(None)


class DeleteProductHandler(RequestHandler[DeleteProduct, Result[None]]):
    """상품 삭제 핸들러"""

    async def handle(
        self, request: DeleteProduct, cancel_event: Optional[asyncio.Event] = None
    ) -> Result[None]:
        raise_if_cancelled(cancel_event)
        deleted = await self.repository.delete(request.id)

        if not deleted:
            return Result.failure(not_found_message(request.id))

        return Result.success(None)
