"""Application configuration loading helpers."""

from __future__ import annotations

from functools import lru_cache
from typing import Any, Literal

from pydantic import BaseModel, Field, PrivateAttr
from sqlalchemy.engine import URL
from pydantic_settings import BaseSettings, SettingsConfigDict


class DatabaseSettings(BaseModel):
    url: str
    pool_size: int = 5
    max_overflow: int = 5
    echo: bool = False


class SecuritySettings(BaseModel):
    secret: str
    jwt_algorithm: str = "HS256"
    token_expire_hours: int = 3


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=(".env", ".env.local"),
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        populate_by_name=True,
    )

    app_name: str = Field(default="Warehouse Control", alias="APP_NAME")
    environment: Literal["development", "staging", "production"] = Field(
        default="development", alias="ENVIRONMENT"
    )
    api_host: str = Field(default="0.0.0.0", alias="API_HOST")
    api_port: int = Field(default=8000, alias="API_PORT")
    log_level: str = Field(default="INFO", alias="LOG_LEVEL")
    request_timeout_seconds: float = Field(default=10.0, alias="REQUEST_TIMEOUT_SECONDS")

    db_host: str = Field(default="localhost", alias="DB_HOST")
    db_port: int = Field(default=5432, alias="DB_PORT")
    db_user: str = Field(default="postgres", alias="DB_USER")
    db_password: str = Field(default="", alias="DB_PASSWORD")
    db_name: str = Field(default="warehouse", alias="DB_NAME")
    database_url: str | None = Field(default=None, alias="DATABASE_URL")
    database_pool_size: int = Field(default=5, alias="DATABASE_POOL_SIZE")
    database_max_overflow: int = Field(default=5, alias="DATABASE_MAX_OVERFLOW")
    database_echo: bool = Field(default=False, alias="DATABASE_ECHO")

    secret: str = Field(alias="SECRET")
    jwt_algorithm: str = Field(default="HS256", alias="JWT_ALGORITHM")
    token_expire_hours: int = Field(default=3, alias="TOKEN_EXPIRE_HOURS")

    _database: DatabaseSettings = PrivateAttr()
    _security: SecuritySettings = PrivateAttr()

    def model_post_init(self, __context: Any) -> None:  # pragma: no cover - simple data wiring
        object.__setattr__(
            self,
            "_database",
            DatabaseSettings(
                url=self.database_url or self._build_database_url(),
                pool_size=self.database_pool_size,
                max_overflow=self.database_max_overflow,
                echo=self.database_echo,
            ),
        )
        object.__setattr__(
            self,
            "_security",
            SecuritySettings(
                secret=self.secret,
                jwt_algorithm=self.jwt_algorithm,
                token_expire_hours=self.token_expire_hours,
            ),
        )

    def _build_database_url(self) -> str:
        url = URL.create(
            "postgresql+psycopg",
            username=self.db_user,
            password=self.db_password or None,
            host=self.db_host,
            port=self.db_port,
            database=self.db_name,
        )
        return url.render_as_string(hide_password=False)

    @property
    def database(self) -> DatabaseSettings:
        return self._database

    @property
    def security(self) -> SecuritySettings:
        return self._security


@lru_cache
def get_settings() -> Settings:
    return Settings()  # type: ignore[call-arg]


__all__ = ["Settings", "get_settings", "DatabaseSettings", "SecuritySettings"]
