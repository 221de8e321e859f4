"""
pytest 픽스처 정의
"""

from unittest.mock import AsyncMock

import pytest
import pytest_asyncio
from fastapi.testclient import TestClient

from catalog.core.config import Settings
from catalog.db.database import create_db_engine, create_session_factory, init_models
from catalog.main import create_app
from catalog.repositories.base import ProductRepository
from catalog.repositories.product_repository import SqlAlchemyProductRepository


@pytest.fixture(scope="session")
def settings():
    """테스트용 설정 객체 픽스처 (in-memory SQLite)"""
    return Settings(
        database_url="sqlite+aiosqlite://",
        log_level="DEBUG",
        disconnect_poll_seconds=0.05,
    )


@pytest_asyncio.fixture
async def session_factory(settings):
    """
    테스트용 in-memory SQLite 세션 팩토리 픽스처

    각 테스트 함수마다 새로운 데이터베이스를 생성하고,
    테스트 종료 후 엔진을 정리하여 격리를 보장합니다.
    """
    engine = create_db_engine(settings)
    await init_models(engine)

    try:
        yield create_session_factory(engine)
    finally:
        await engine.dispose()


@pytest.fixture
def repository(session_factory) -> SqlAlchemyProductRepository:
    """실제 DB를 사용하는 상품 저장소 픽스처"""
    return SqlAlchemyProductRepository(session_factory)


@pytest.fixture
def mock_repository() -> AsyncMock:
    """핸들러 단위 테스트용 저장소 mock 픽스처"""
    return AsyncMock(spec=ProductRepository)


@pytest.fixture(scope="function")
def test_client(settings):
    """
    FastAPI TestClient 픽스처

    테스트마다 앱을 새로 만들어 lifespan에서 빈 in-memory DB를 생성합니다.
    """
    with TestClient(create_app(settings)) as client:
        yield client
