"""
요청 검증 규칙

요청 타입별 규칙 함수를 명시적인 테이블로 등록합니다.
검증은 순수 함수이며 I/O가 없고, 첫 위반에서 멈추지 않고 모든 위반을 수집합니다.
"""

from typing import Callable

from catalog.application.requests import (
    CreateProduct,
    DeleteProduct,
    Request,
    UpdateProduct,
)
from catalog.core.result import Violation

NAME_MAX_LENGTH = 100

NAME_REQUIRED = "Name is required."
NAME_TOO_LONG = f"Name must not exceed {NAME_MAX_LENGTH} characters."
PRICE_NOT_POSITIVE = "Price must be greater than 0."
ID_NOT_POSITIVE = "Id must be greater than 0."

Validator = Callable[[Request], list[Violation]]


def _check_id(product_id: int) -> list[Violation]:
    if product_id <= 0:
        return [Violation("id", ID_NOT_POSITIVE)]
    return []


def _check_name(name: str) -> list[Violation]:
    if not name or not name.strip():
        return [Violation("name", NAME_REQUIRED)]
    if len(name) > NAME_MAX_LENGTH:
        return [Violation("name", NAME_TOO_LONG)]
    return []


def _check_price(price) -> list[Violation]:
    if price <= 0:
        return [Violation("price", PRICE_NOT_POSITIVE)]
    return []


def validate_create_product(request: CreateProduct) -> list[Violation]:
    """상품 생성 요청 검증: name, price"""
    return _check_name(request.name) + _check_price(request.price)


def validate_update_product(request: UpdateProduct) -> list[Violation]:
    """상품 수정 요청 검증: id, name, price"""
    return (
        _check_id(request.id)
        + _check_name(request.name)
        + _check_price(request.price)
    )


def validate_delete_product(request: DeleteProduct) -> list[Violation]:
    """상품 삭제 요청 검증: id"""
    return _check_id(request.id)


# 조회 요청(GetProductById, GetAllProducts)은 규칙이 없음
# GetProductById는 0 이하 ID도 그대로 저장소에 전달되어 not found로 처리됨
VALIDATORS: dict[type, Validator] = {
    CreateProduct: validate_create_product,
    UpdateProduct: validate_update_product,
    DeleteProduct: validate_delete_product,
}


def validate(request: Request) -> list[Violation]:
    """
    요청 타입에 등록된 규칙으로 요청을 검증합니다.

    Args:
        request: 검증할 요청 객체

    Returns:
        위반 목록 (비어 있으면 유효한 요청)

    Example:
        >>> validate(DeleteProduct(id=0))
        [Violation(field='id', message='Id must be greater than 0.')]
    """
    validator = VALIDATORS.get(type(request))
    if validator is None:
        return []
    return validator(request)
