# status_api/config/settings.py
from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    environment: str = "development"
    debug: bool = True

    host: str = "0.0.0.0"
    port: int = 5000

    api_prefix: str = "/api"

    # 🔑 Chave compartilhada (header X-API-Key)
    api_key: str = "demo-api-key-12345"
    api_key_header: str = "X-API-Key"
    docs_path_prefix: str = "/swagger"
    health_path: str = "/health"

    # ⏱️ Janela fixa: 2 requisições a cada 100s, sem fila
    rate_limit_permit_limit: int = 2
    rate_limit_window_seconds: float = 100.0

    cors_origins: list[str] = [
        "http://localhost:5173",
        "http://127.0.0.1:5173",
    ]

    seed_demo_data: bool = True

    log_level: str = "INFO"
    log_format: str = "json"

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=False,
        extra="ignore",
    )

    @field_validator("api_key", "api_key_header", mode="before")
    @classmethod
    def strip_strings(cls, v):
        if isinstance(v, str):
            return v.strip().strip('"').strip("'")
        return v

    @field_validator("log_level", mode="after")
    @classmethod
    def check_log_level(cls, v: str) -> str:
        level = v.strip().upper()
        if level not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
            raise ValueError(f"invalid log level: {v}")
        return level

    @field_validator("api_prefix", mode="after")
    @classmethod
    def normalize_prefix(cls, v: str) -> str:
        return "/" + v.strip("/") if v.strip("/") else ""


settings = Settings()
