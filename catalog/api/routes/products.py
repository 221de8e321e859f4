"""
상품 API 엔드포인트

모든 엔드포인트는 요청 객체를 만들어 디스패처로 보내고,
반환된 Result를 HTTP 응답으로 변환합니다.
- 검증 실패(Result.invalid) → 400
- 상품 없음(Result.failure) → 404
"""

import asyncio
from typing import List

from fastapi import APIRouter, Depends, HTTPException, Response, status

from catalog.api.deps import get_cancel_event, get_dispatcher
from catalog.application.dispatcher import Dispatcher
from catalog.application.requests import (
    CreateProduct,
    DeleteProduct,
    GetAllProducts,
    GetProductById,
    UpdateProduct,
)
from catalog.core.result import Result
from catalog.schemas.product import (
    ProductCreateRequest,
    ProductResponse,
    ProductUpdateRequest,
)

router = APIRouter()


def raise_for_failure(result: Result) -> None:
    """실패한 Result를 HTTPException으로 변환합니다."""
    if result.is_success:
        return

    if result.is_invalid:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=result.error,
        )

    raise HTTPException(
        status_code=status.HTTP_404_NOT_FOUND,
        detail=result.error,
    )


@router.get("", response_model=List[ProductResponse], name="GetAllProducts")
async def list_products(dispatcher: Dispatcher = Depends(get_dispatcher)):
    """
    모든 상품 목록을 조회합니다.

    Returns:
        List[ProductResponse]: 상품 목록 (ID 순, 없으면 빈 배열)
    """
    return await dispatcher.send(GetAllProducts())


@router.get("/{product_id}", response_model=ProductResponse, name="GetProductById")
async def get_product(
    product_id: int,
    dispatcher: Dispatcher = Depends(get_dispatcher),
):
    """
    특정 상품의 상세 정보를 조회합니다.

    Raises:
        HTTPException 404: 상품을 찾을 수 없는 경우

    Example:
        Response (404):
        ```json
        {"detail": "Product with ID 99 not found."}
        ```
    """
    result = await dispatcher.send(GetProductById(id=product_id))
    raise_for_failure(result)
    return result.value


@router.post(
    "",
    response_model=int,
    status_code=status.HTTP_201_CREATED,
    name="CreateProduct",
)
async def create_product(
    product_data: ProductCreateRequest,
    response: Response,
    dispatcher: Dispatcher = Depends(get_dispatcher),
    cancel_event: asyncio.Event = Depends(get_cancel_event),
):
    """
    새 상품을 생성합니다.

    Returns:
        int: 생성된 상품 ID (Location 헤더에 상품 경로 포함)

    Raises:
        HTTPException 400: 검증 실패 (이름 누락/100자 초과, 가격 0 이하)

    Example:
        Request:
        ```json
        {
            "name": "Test Product",
            "description": "Test Description",
            "price": 19.99,
            "stock": 10
        }
        ```

        Response (201):
        ```json
        1
        ```
    """
    command = CreateProduct(
        name=product_data.name,
        description=product_data.description,
        price=product_data.price,
        stock=product_data.stock,
    )
    outcome = await dispatcher.send(command, cancel_event)

    # 생성은 성공 시 ID를 그대로 반환하고, 검증 실패 시에만 Result가 돌아옴
    if isinstance(outcome, Result):
        raise_for_failure(outcome)

    response.headers["Location"] = f"/products/{outcome}"
    return outcome


@router.put(
    "/{product_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    name="UpdateProduct",
)
async def update_product(
    product_id: int,
    product_data: ProductUpdateRequest,
    dispatcher: Dispatcher = Depends(get_dispatcher),
    cancel_event: asyncio.Event = Depends(get_cancel_event),
):
    """
    상품의 이름, 설명, 가격을 수정합니다.

    Raises:
        HTTPException 400: URL의 ID와 본문의 ID가 다르거나 검증 실패
        HTTPException 404: 상품을 찾을 수 없는 경우
    """
    if product_id != product_data.id:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="ID in URL does not match ID in request body",
        )

    command = UpdateProduct(
        id=product_data.id,
        name=product_data.name,
        description=product_data.description,
        price=product_data.price,
    )
    result = await dispatcher.send(command, cancel_event)
    raise_for_failure(result)

    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.delete(
    "/{product_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    name="DeleteProduct",
)
async def delete_product(
    product_id: int,
    dispatcher: Dispatcher = Depends(get_dispatcher),
    cancel_event: asyncio.Event = Depends(get_cancel_event),
):
    """
    상품을 삭제합니다.

    Raises:
        HTTPException 400: ID가 0 이하인 경우
        HTTPException 404: 상품을 찾을 수 없는 경우
    """
    result = await dispatcher.send(DeleteProduct(id=product_id), cancel_event)
    raise_for_failure(result)

    return Response(status_code=status.HTTP_204_NO_CONTENT)
