"""
상품 저장소 포트 (인터페이스)

핸들러는 이 포트를 통해서만 상품 데이터에 접근합니다.
구현체는 인프라 오류를 빈 값/False로 숨기지 않고 RepositoryError로 전파해야 합니다.
"""

from abc import ABC, abstractmethod
from typing import Optional

from catalog.models import Product


class ProductRepository(ABC):
    """상품 저장소 추상 인터페이스"""

    @abstractmethod
    async def create(self, product: Product) -> int:
        """상품을 저장하고 새로 할당된 ID를 반환"""

    @abstractmethod
    async def get_all(self) -> list[Product]:
        """전체 상품을 ID 순으로 조회 (없으면 빈 리스트)"""

    @abstractmethod
    async def get_by_id(self, product_id: int) -> Optional[Product]:
        """ID로 상품 조회 (없으면 None)"""

    @abstractmethod
    async def update(self, product: Product) -> bool:
        """이름, 설명, 가격, 수정 일시를 갱신 (변경된 행이 있으면 True)"""

    @abstractmethod
    async def delete(self, product_id: int) -> bool:
        """상품 삭제 (삭제된 행이 있으면 True)"""
