import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from catalog.api.routes import products
from catalog.application.registry import build_dispatcher
from catalog.core.config import Settings, get_settings
from catalog.core.exceptions import RepositoryError
from catalog.core.logging import configure_logging
from catalog.db.database import create_db_engine, create_session_factory, init_models
from catalog.repositories.product_repository import SqlAlchemyProductRepository

logger = logging.getLogger(__name__)


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """
    FastAPI 애플리케이션을 생성합니다.

    기동 시(lifespan) 로깅 설정, DB 엔진 생성 및 테이블 생성,
    디스패처 구성을 수행하고 종료 시 엔진을 정리합니다.

    Args:
        settings: 애플리케이션 설정 (없으면 환경 변수에서 로드)
    """
    settings = settings or get_settings()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        configure_logging(settings.log_level)

        engine = create_db_engine(settings)
        await init_models(engine)

        repository = SqlAlchemyProductRepository(create_session_factory(engine))
        app.state.dispatcher = build_dispatcher(repository)
        logger.info("Product catalog API started (env=%s)", settings.app_env)

        try:
            yield
        finally:
            await engine.dispose()

    app = FastAPI(
        title="Product Catalog API",
        description="커맨드/쿼리 디스패처 기반 상품 카탈로그 CRUD API",
        version="0.1.0",
        lifespan=lifespan,
    )

    app.state.settings = settings

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origin_list,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.exception_handler(RepositoryError)
    async def repository_error_handler(request: Request, exc: RepositoryError):
        # 내부 오류 내용은 로그에만 남기고 응답에는 노출하지 않음
        logger.error("Repository failure on %s %s: %s", request.method, request.url.path, exc)
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"detail": "Internal server error"},
        )

    # 라우터 등록
    app.include_router(products.router, prefix="/products", tags=["products"])

    @app.get("/")
    async def root():
        """루트 엔드포인트"""
        return {
            "message": "Product Catalog API",
            "status": "running",
            "docs": "/docs",
        }

    @app.get("/health")
    async def health_check():
        """헬스체크 엔드포인트 (Docker 헬스체크용)"""
        return {"status": "healthy"}

    return app


app = create_app()
