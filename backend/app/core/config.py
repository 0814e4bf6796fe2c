from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Configuración del servidor, leída de variables de entorno ITAG_*."""

    model_config = SettingsConfigDict(env_prefix="ITAG_", extra="ignore", case_sensitive=False)

    app_title: str = Field(default="cnrxad's itag lister - API")
    app_description: str = Field(default="cnrxad - itag API")
    app_version: str = Field(default="1.0.0")

    host: str = Field(default="127.0.0.1", description="Interfaz donde escucha uvicorn.")
    port: int = Field(default=4321, description="Puerto HTTP.")
    log_level: str = Field(default="INFO", description="Nivel de logging (INFO, DEBUG...).")

    ytdlp_quiet: bool = Field(default=True, description="Silencia la salida de yt-dlp.")


@lru_cache
def get_settings() -> Settings:
    return Settings()
