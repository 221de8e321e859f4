"""커맨드/쿼리 디스패치 및 검증 파이프라인."""

from catalog.application.dispatcher import Dispatcher
from catalog.application.registry import build_dispatcher
from catalog.application.requests import (
    CreateProduct,
    DeleteProduct,
    GetAllProducts,
    GetProductById,
    UpdateProduct,
)

__all__ = [
    "Dispatcher",
    "build_dispatcher",
    "CreateProduct",
    "DeleteProduct",
    "GetAllProducts",
    "GetProductById",
    "UpdateProduct",
]
