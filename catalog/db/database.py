"""
SQLAlchemy 데이터베이스 설정

SQLAlchemy asyncio 엔진, 세션 팩토리, Base 클래스를 정의합니다.
"""

from sqlalchemy.ext.asyncio import AsyncEngine, async_sessionmaker, create_async_engine
from sqlalchemy.orm import declarative_base
from sqlalchemy.pool import StaticPool

from catalog.core.config import Settings
from catalog.core.exceptions import ConfigurationError

Base = declarative_base()


def create_db_engine(settings: Settings) -> AsyncEngine:
    """
    설정으로부터 비동기 엔진을 생성합니다.

    Args:
        settings: 애플리케이션 설정 객체

    Returns:
        AsyncEngine 인스턴스

    Raises:
        ConfigurationError: database_url이 비어 있는 경우
    """
    if not settings.database_url:
        raise ConfigurationError("Database connection string is not configured.")

    if settings.is_memory_database:
        # in-memory SQLite는 connection 하나를 공유해야 테이블이 유지됨
        return create_async_engine(
            settings.database_url,
            echo=settings.database_echo,
            connect_args={"check_same_thread": False},
            poolclass=StaticPool,
        )

    return create_async_engine(
        settings.database_url,
        echo=settings.database_echo,
        pool_pre_ping=True,  # connection 유효성 자동 체크
    )


def create_session_factory(engine: AsyncEngine) -> async_sessionmaker:
    """
    비동기 세션 팩토리를 생성합니다.

    커밋 후에도 반환한 객체의 속성을 읽을 수 있도록 expire_on_commit=False로 설정합니다.
    """
    return async_sessionmaker(engine, autoflush=False, expire_on_commit=False)


async def init_models(engine: AsyncEngine) -> None:
    """모든 테이블을 생성합니다 (이미 존재하면 건너뜀)."""
    # 모델 모듈을 import해야 Base.metadata에 테이블이 등록됨
    import catalog.models  # noqa: F401

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
