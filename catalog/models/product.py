"""
Product 모델
"""

from sqlalchemy import Column, DateTime, Integer, Numeric, String, Text

from catalog.db.database import Base


class Product(Base):
    """
    상품 모델

    Attributes:
        id: 상품 고유 ID (Primary Key, 저장소가 생성 시 할당)
        name: 상품명 (Not Null, 최대 100자)
        description: 상품 설명 (빈 문자열 허용)
        price: 가격 (Not Null, 소수점 2자리)
        stock: 재고 수량 (Not Null, 기본값 0)
        created_at: 생성 일시 (UTC, 생성 시 핸들러가 설정, 이후 변경 불가)
        updated_at: 수정 일시 (UTC, 최초 수정 전까지 NULL)
    """

    __tablename__ = "products"
    # SQLite에서도 삭제된 ID가 재사용되지 않도록 AUTOINCREMENT 사용
    __table_args__ = {"sqlite_autoincrement": True}

    id = Column(Integer, primary_key=True, autoincrement=True, index=True)
    name = Column(String(100), nullable=False, index=True)
    description = Column(Text, nullable=False, default="")
    price = Column(Numeric(18, 2), nullable=False)
    stock = Column(Integer, nullable=False, default=0)
    created_at = Column(DateTime, nullable=False)
    updated_at = Column(DateTime, nullable=True)

    def __repr__(self) -> str:
        """Product 객체의 문자열 표현"""
        return f"<Product(id={self.id}, name='{self.name}', price={self.price})>"

    def __str__(self) -> str:
        return f"Product: {self.name}"
