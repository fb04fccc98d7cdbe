"""Application configuration."""

import json
from typing import Annotated

from pydantic import field_validator
from pydantic_settings import BaseSettings, NoDecode, SettingsConfigDict

from planet_tiles.terrain.field import FieldVariant
from planet_tiles.terrain.palette import Palette


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="PLANET_TILES_",
        env_file=".env",
        env_file_encoding="utf-8",
    )

    # Listen address
    host: str = "0.0.0.0"
    port: int = 8080

    # Logging
    log_level: str = "info"

    # Rendering
    noise_seed: int = 0
    field_variant: FieldVariant = FieldVariant.TORUS
    palette: Palette = Palette.ELEVATION

    # Deepest zoom served; the field's octave count grows with zoom
    max_zoom: int = 30

    # CORS configuration, passed to the validator as the raw env string
    cors_origins: Annotated[list[str], NoDecode] = ["*"]

    @field_validator("cors_origins", mode="before")
    @classmethod
    def parse_cors_origins(cls, v):
        """Parse CORS origins from string (JSON or comma-separated) or list."""
        if isinstance(v, str):
            # Try JSON first
            try:
                parsed = json.loads(v)
                if isinstance(parsed, list):
                    return parsed
            except json.JSONDecodeError:
                pass
            # Fall back to comma-separated
            return [origin.strip() for origin in v.split(",") if origin.strip()]
        return v


settings = Settings()
