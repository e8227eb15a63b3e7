from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8")

    # App
    log_level: str = "INFO"

    # CORS
    cors_origins: list[str] = ["http://localhost:5000"]

    # Providers
    recognition_provider: str = "gemini"  # "gemini" | "hf_space" | "mock"
    translation_provider: str = "gemini"  # "gemini" | "mock"
    overlay_provider: str = "pillow"  # "pillow" | "passthrough"

    # Gemini API
    gemini_api_key: str = ""
    gemini_model: str = "gemini-2.5-flash-lite"
    gemini_temperature: float = 0.3

    # HuggingFace Space OCR
    hf_space_url: str = ""
    hf_api_timeout: int = 120

    # Rendering
    max_font_size: int = 72

    # Recognition
    default_min_confidence: float = 0.6


@lru_cache
def get_settings() -> Settings:
    return Settings()
