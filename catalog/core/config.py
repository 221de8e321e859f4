"""
애플리케이션 설정 관리

Pydantic Settings를 사용하여 환경 변수를 로드합니다.
.env 파일 또는 시스템 환경 변수에서 설정을 읽어옵니다.
"""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """애플리케이션 설정 클래스"""

    # 데이터베이스 설정 (SQLAlchemy asyncio 드라이버 URL)
    database_url: str = "sqlite+aiosqlite:///./catalog.db"
    database_echo: bool = False

    # CORS 설정 (프론트엔드 origin, 쉼표로 구분)
    cors_allow_origins: str = "*"

    # 클라이언트 연결 끊김 확인 주기 (초)
    disconnect_poll_seconds: float = 0.5

    # 애플리케이션 설정
    app_env: str = "development"
    log_level: str = "INFO"

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",  # 정의되지 않은 환경 변수 무시
    )

    @property
    def cors_origin_list(self) -> list[str]:
        """
        CORS 허용 origin 목록 파싱

        Returns:
            ["http://localhost:3000", "https://shop.example.com", ...]
        """
        return [
            origin.strip()
            for origin in self.cors_allow_origins.split(",")
            if origin.strip()
        ]

    @property
    def is_memory_database(self) -> bool:
        """in-memory SQLite 사용 여부"""
        return self.database_url.startswith("sqlite") and (
            ":memory:" in self.database_url or self.database_url.endswith("://")
        )


def get_settings() -> Settings:
    """
    Settings 인스턴스를 반환하는 팩토리 함수
    """
    return Settings()
