from pydantic_settings import BaseSettings, NoDecode, SettingsConfigDict
from pydantic import field_validator
from typing import Annotated, Any, ClassVar
import json
from pathlib import Path


class Settings(BaseSettings):
    API_PREFIX: str = "/api"

    # Database URL
    # Use an absolute path so running the app from different directories
    # (e.g., repo root or backend/) always resolves the same DB file.
    BASE_DIR: ClassVar[Path] = Path(__file__).resolve().parents[2]
    SQLALCHEMY_DATABASE_URL: str = f"sqlite:///{BASE_DIR / 'backoffice.db'}"

    # CORS origins; NoDecode hands the raw env string to split_origins
    CORS_ORIGINS: Annotated[list[str], NoDecode] = ["http://localhost:3000", "http://localhost:5173"]

    # Comma-separated list; the first entry is used to build public budget links
    FRONTEND_ORIGIN: str = ""

    # Google Maps (Distance Matrix + Geocoding)
    GOOGLE_MAPS_API_KEY: str = ""
    GOOGLE_MAPS_LANGUAGE: str = "pt-BR"
    GOOGLE_MAPS_TIMEOUT: float = 10.0

    # Local timezone used to render planned dates in job titles
    TIMEZONE: str = "America/Sao_Paulo"

    LOG_LEVEL: str = "INFO"

    @field_validator("CORS_ORIGINS", mode="before")
    def split_origins(cls, v: Any) -> list[str]:
        """Parse comma-separated or JSON list of origins from environment."""
        if isinstance(v, str):
            try:
                parsed = json.loads(v)
                if isinstance(parsed, list):
                    return parsed
            except json.JSONDecodeError:
                pass
            return [s.strip() for s in v.split(",") if s.strip()]
        return v

    @field_validator("GOOGLE_MAPS_API_KEY", "FRONTEND_ORIGIN", mode="before")
    def strip_values(cls, v: Any) -> Any:
        if isinstance(v, str):
            return v.strip()
        return v

    @property
    def frontend_origins(self) -> list[str]:
        return [s.strip() for s in self.FRONTEND_ORIGIN.split(",") if s.strip()]

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")


settings = Settings()
