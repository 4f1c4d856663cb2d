"""설정 관리 모듈."""

from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """애플리케이션 설정."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # 빌드 시점에 주입되는 토큰. 저장된 토큰보다 우선한다.
    github_token: str | None = Field(default=None, description="GitHub 액세스 토큰")
    github_api_url: str = Field(
        default="https://api.github.com",
        description="GitHub REST API 기본 URL",
    )
    request_timeout: float | None = Field(
        default=None,
        description="HTTP 요청 타임아웃 (초). None이면 httpx 기본값을 사용한다.",
    )

    token_file: Path = Field(
        default=Path.home() / ".config" / "profile-lens" / "token.json",
        description="사용자가 저장한 토큰 파일 경로",
    )
    share_base_url: str = Field(
        default="https://profile-lens.app/",
        description="공유 링크 기본 URL",
    )


settings = Settings()
