from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import field_validator, Field
from typing import Optional

from cubegame.cube import MIN_SIZE, MAX_SIZE


class Settings(BaseSettings):
    """Game settings read from the environment and an optional .env file"""

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=False,
        extra="ignore",  # Ignore extra fields from environment
        populate_by_name=True,
    )

    # Application
    app_name: str = "CubeGame"
    app_version: str = "0.1.0"
    debug: bool = Field(default=False, alias="DEBUG")
    log_level: str = Field(default="WARNING", alias="LOG_LEVEL")

    # Cube
    cube_size: int = Field(default=3, alias="CUBE_SIZE")

    # Shuffle
    shuffle_iterations: int = Field(default=1000, ge=0, alias="SHUFFLE_ITERATIONS")
    shuffle_seed: Optional[int] = Field(default=None, alias="SHUFFLE_SEED")

    # Statistics
    player_name: str = Field(default="", alias="PLAYER_NAME")

    @field_validator("cube_size")
    @classmethod
    def check_cube_size(cls, v):
        if not MIN_SIZE <= v <= MAX_SIZE:
            raise ValueError(f"cube_size must be between {MIN_SIZE} and {MAX_SIZE}")
        return v

    @field_validator("log_level")
    @classmethod
    def check_log_level(cls, v):
        v = v.upper()
        if v not in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"):
            raise ValueError(f"Unknown log level '{v}'")
        return v


def get_settings(**overrides) -> Settings:
    """Load a fresh Settings instance, applying keyword overrides"""
    return Settings(**overrides)


# Create settings instance
settings = Settings()
