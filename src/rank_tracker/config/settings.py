from __future__ import annotations

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_USER_AGENT = (
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64) "
    "AppleWebKit/537.36 (KHTML, like Gecko) "
    "Chrome/120.0.0.0 Safari/537.36"
)


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env", env_file_encoding="utf-8", populate_by_name=True
    )

    database_url: str | None = Field(default=None, alias="DATABASE_URL")

    http_timeout: int = Field(default=20, alias="HTTP_TIMEOUT")

    naver_search_url: str = Field(
        default="https://search.naver.com/search.naver", alias="NAVER_SEARCH_URL"
    )
    user_agent: str = Field(default=DEFAULT_USER_AGENT, alias="USER_AGENT")
    accept_language: str = Field(default="ko-KR,ko;q=0.9,en;q=0.8", alias="ACCEPT_LANGUAGE")

    site_rank_scope: str = Field(default="web", alias="SITE_RANK_SCOPE")
    url_tracking_scope: str = Field(default="nexearch", alias="URL_TRACKING_SCOPE")

    log_level: str = Field(default="INFO", alias="LOG_LEVEL")


_settings: Settings | None = None


def get_settings() -> Settings:
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings
