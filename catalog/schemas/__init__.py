"""
Pydantic 스키마 모듈
"""

from catalog.schemas.product import (
    ProductCreateRequest,
    ProductResponse,
    ProductUpdateRequest,
)

__all__ = [
    "ProductCreateRequest",
    "ProductResponse",
    "ProductUpdateRequest",
]
