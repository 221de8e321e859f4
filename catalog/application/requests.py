"""
커맨드/쿼리 요청 객체

각 요청은 해당 작업에 필요한 필드만 담은 불변(frozen) 값 객체입니다.
"""

from dataclasses import dataclass
from decimal import Decimal


@dataclass(frozen=True)
class Request:
    """모든 커맨드/쿼리 요청의 기반 클래스"""


@dataclass(frozen=True)
class CreateProduct(Request):
    """Command: 상품 생성 (응답: 새 상품 ID)"""

    name: str
    price: Decimal
    description: str = ""
    stock: int = 0


@dataclass(frozen=True)
class UpdateProduct(Request):
    """Command: 상품 수정 (응답: Result[None])"""

    id: int
    name: str
    price: Decimal
    description: str = ""


@dataclass(frozen=True)
class DeleteProduct(Request):
    """Command: 상품 삭제 (응답: Result[None])"""

    id: int


@dataclass(frozen=True)
class GetProductById(Request):
    """Query: 상품 단건 조회 (응답: Result[Product])"""

    id: int


@dataclass(frozen=True)
class GetAllProducts(Request):
    """Query: 전체 상품 조회 (응답: list[Product])"""
