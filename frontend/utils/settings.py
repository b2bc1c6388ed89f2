# utils/settings.py
from pathlib import Path
from typing import Literal

from pydantic_settings import BaseSettings, SettingsConfigDict


class FrontendSettings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        env_ignore_empty=True,
    )

    API_BASE: str = "http://127.0.0.1:8000"
    API_TIMEOUT: int = 10
    # dónde persiste el token entre recargas:
    # cookie = navegador de cada visitante; file = un archivo local (un solo usuario);
    # memory = sólo la sesión actual
    TOKEN_STORE: Literal["cookie", "file", "memory"] = "cookie"
    TOKEN_COOKIE: str = "portfolio_token"
    TOKEN_COOKIE_DAYS: int = 30
    TOKEN_DIR: Path = Path.home() / ".portfolio"
    TOKEN_PROFILE: str = "default"

    @property
    def api_base(self) -> str:
        return self.API_BASE.rstrip("/")


_settings: FrontendSettings | None = None


def get_settings() -> FrontendSettings:
    global _settings
    if _settings is None:
        _settings = FrontendSettings()
    return _settings
