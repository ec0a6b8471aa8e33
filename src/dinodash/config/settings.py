"""
Application settings using Pydantic.

Settings are loaded from environment variables (prefix ``DINODASH_``,
nested with ``__``) with .env file support.
"""

from functools import lru_cache
from typing import Literal, Optional

from pydantic import Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class FieldSettings(BaseSettings):
    """Play-field geometry and physics constants. Immutable once built."""

    model_config = SettingsConfigDict(env_prefix="DINODASH_FIELD_", frozen=True)

    width: int = Field(default=800, gt=0)
    height: int = Field(default=300, gt=0)
    ground_y: float = Field(default=250.0, gt=0)

    # Physics
    gravity: float = Field(default=0.8, gt=0)
    jump_impulse: float = Field(default=-13.0, lt=0)
    base_speed: float = Field(default=6.0, gt=0)

    # Decor
    max_clouds: int = Field(default=3, ge=0)
    ground_period: float = Field(default=50.0, gt=0)

    @model_validator(mode="after")
    def _ground_inside_field(self) -> "FieldSettings":
        if self.ground_y > self.height:
            raise ValueError(
                f"ground_y ({self.ground_y}) must lie inside the field height ({self.height})"
            )
        return self


class DisplaySettings(BaseSettings):
    """Simulator window settings."""

    model_config = SettingsConfigDict(env_prefix="DINODASH_DISPLAY_")

    scale: int = Field(default=1, ge=1)
    fps: int = Field(default=60, gt=0)
    theme: Literal["light", "dark"] = "light"
    title: str = "Dino Dash"


class Settings(BaseSettings):
    """Main application settings."""

    model_config = SettingsConfigDict(
        env_prefix="DINODASH_",
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",
        extra="ignore",
    )

    # Environment
    env: Literal["simulator", "headless"] = "simulator"
    debug: bool = False

    # Seed for the obstacle/cloud random source (None = nondeterministic)
    seed: Optional[int] = None

    # Headless runner
    headless_games: int = Field(default=5, gt=0)
    headless_max_ticks: int = Field(default=20_000, gt=0)

    # Nested settings
    field: FieldSettings = Field(default_factory=FieldSettings)
    display: DisplaySettings = Field(default_factory=DisplaySettings)

    @property
    def is_simulator(self) -> bool:
        """Check if running with a window."""
        return self.env == "simulator"

    @property
    def is_headless(self) -> bool:
        """Check if running without a window."""
        return self.env == "headless"


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
