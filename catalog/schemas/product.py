"""
상품 관련 Pydantic 스키마

API 요청/응답 모델을 정의합니다.
이름과 가격 규칙은 디스패처의 검증 단계에서 확인하므로
여기서는 걸러내지 않습니다 (400 응답과 메시지를 일관되게 유지).
"""

from datetime import datetime
from decimal import Decimal

from pydantic import BaseModel, ConfigDict, Field, field_serializer

# 재고는 INTEGER 컬럼(signed 64-bit)에 저장
MAX_STOCK = 2**63 - 1


class ProductCreateRequest(BaseModel):
    """
    상품 생성 요청 스키마

    Example:
        {
            "name": "Test Product",
            "description": "Test Description",
            "price": 19.99,
            "stock": 10
        }
    """

    name: str = Field(..., description="상품명 (1-100자)", examples=["Test Product"])
    description: str = Field("", description="상품 설명", examples=["Test Description"])
    price: Decimal = Field(..., description="상품 가격 (양수)", examples=[19.99])
    stock: int = Field(
        0, ge=0, le=MAX_STOCK, description="초기 재고 수량 (0 이상)", examples=[10]
    )


class ProductUpdateRequest(BaseModel):
    """
    상품 수정 요청 스키마 (id는 URL의 ID와 일치해야 함)

    Example:
        {
            "id": 1,
            "name": "Updated Product",
            "description": "Updated Description",
            "price": 29.99
        }
    """

    id: int = Field(..., description="수정할 상품 ID", examples=[1])
    name: str = Field(..., description="상품명 (1-100자)", examples=["Updated Product"])
    description: str = Field("", description="상품 설명", examples=["Updated Description"])
    price: Decimal = Field(..., description="상품 가격 (양수)", examples=[29.99])


class ProductResponse(BaseModel):
    """
    상품 정보 응답 스키마

    Example:
        {
            "id": 1,
            "name": "Test Product",
            "description": "Test Description",
            "price": 19.99,
            "stock": 10,
            "created_at": "2025-01-22T10:30:00",
            "updated_at": null
        }
    """

    model_config = ConfigDict(from_attributes=True)

    id: int = Field(..., description="상품 ID")
    name: str = Field(..., description="상품명")
    description: str = Field(..., description="상품 설명")
    price: Decimal = Field(..., description="상품 가격 (소수점 2자리)")
    stock: int = Field(..., description="재고 수량")
    created_at: datetime = Field(..., description="상품 생성 일시")
    updated_at: datetime | None = Field(None, description="상품 수정 일시 (수정 전에는 null)")

    @field_serializer("price", when_used="json")
    def serialize_price(self, price: Decimal) -> float:
        # JSON 응답에서는 문자열이 아닌 숫자로 표현
        return float(price)
