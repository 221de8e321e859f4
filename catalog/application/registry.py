"""
디스패처 구성

기동 시점에 요청 타입 → 핸들러 매핑을 명시적으로 한 번 구성합니다.
"""

from catalog.application.dispatcher import Dispatcher
from catalog.application.handlers import (
    CreateProductHandler,
    DeleteProductHandler,
    GetAllProductsHandler,
    GetProductByIdHandler,
    UpdateProductHandler,
)
from catalog.application.requests import (
    CreateProduct,
    DeleteProduct,
    GetAllProducts,
    GetProductById,
    UpdateProduct,
)
from catalog.repositories.base import ProductRepository


def build_dispatcher(repository: ProductRepository) -> Dispatcher:
    """
    상품 요청 핸들러를 모두 등록한 디스패처를 생성합니다.

    Args:
        repository: 핸들러가 공유하는 상품 저장소

    Returns:
        등록이 끝난(frozen) Dispatcher
    """
    dispatcher = Dispatcher()
    dispatcher.register(CreateProduct, CreateProductHandler(repository))
    dispatcher.register(GetAllProducts, GetAllProductsHandler(repository))
    dispatcher.register(GetProductById, GetProductByIdHandler(repository))
    dispatcher.register(UpdateProduct, UpdateProductHandler(repository))
    dispatcher.register(DeleteProduct, DeleteProductHandler(repository))
    dispatcher.freeze()
    return dispatcher
