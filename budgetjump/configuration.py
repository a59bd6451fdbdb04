"""Mini README: Centralised configuration models and helpers for Budget Jump.

Structure:
    * BudgetJumpSettings - Pydantic model describing runtime configuration.
    * get_settings - cached accessor for environment-aware settings.

Usage:
    Import ``get_settings`` to read environment variables (prefixed with
    ``BUDGETJUMP_``), locate the ledger file, and build the ``GameTuning``
    used by the simulation. Tuning values are only range-checked when a game
    starts, so a bad value refuses play instead of preventing the ledger and
    interface from loading.
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import Optional

from pydantic import Field, validator
from pydantic_settings import BaseSettings

from .game.tuning import GameTuning


class BudgetJumpSettings(BaseSettings):
    """Runtime configuration for Budget Jump."""

    environment: str = Field(
        "development",
        description="Environment label; production disables auto-reload and debug logging.",
    )
    data_directory: Path = Field(
        Path("data"),
        description="Directory where the ledger file is stored.",
    )
    ledger_filename: str = Field(
        "game_ledger.json",
        description="Name of the JSON file holding the game score and achievements.",
    )
    interface_host: str = Field(
        "127.0.0.1",
        description="Network interface for the HTTP interface to bind to.",
    )
    interface_port: int = Field(
        8000,
        description="Port the HTTP interface exposes.",
        ge=1,
        le=65535,
    )
    random_seed: Optional[int] = Field(
        None,
        description="Seed for obstacle spawning. Leave unset for varied runs.",
    )
    badge_threshold: int = Field(
        10,
        description="Lifetime badges needed to unlock the Financial Focus title.",
        ge=1,
    )

    gravity: float = Field(0.6, description="Downward acceleration per tick.")
    jump_impulse: float = Field(-12.0, description="Velocity set by a jump (negative is up).")
    ground_tolerance: float = Field(5.0, description="Height above ground that still allows a jump.")
    base_speed: float = Field(1.8, description="Scroll speed at the start of a run.")
    speed_increment: float = Field(0.002, description="Speed added every tick.")
    field_width: float = Field(400.0, description="Width of the visible play field.")
    min_obstacle_distance: float = Field(180.0, description="Smallest gap between obstacles.")
    max_obstacle_distance: float = Field(280.0, description="Largest gap between obstacles.")
    obstacle_width: float = Field(20.0, description="Nominal obstacle sprite width.")
    obstacle_height: float = Field(25.0, description="Nominal obstacle sprite height.")
    player_size: float = Field(40.0, description="Nominal wallet sprite size.")
    player_slot: float = Field(80.0, description="Fixed horizontal position of the wallet.")
    hitbox_scale: float = Field(0.8, description="Fraction of sprite size used for hitboxes.")
    background_wrap: float = Field(-400.0, description="Offset at which the background wraps.")
    tick_interval_seconds: float = Field(0.016, description="Period of the tick source.")

    class Config:
        env_prefix = "BUDGETJUMP_"
        env_file = ".env"
        case_sensitive = False

    @validator("data_directory", pre=True)
    def _expand_path(cls, value: Optional[str | Path]) -> Path:
        """Ensure configured paths expand user directories and exist."""

        path = Path(value).expanduser().resolve()
        path.mkdir(parents=True, exist_ok=True)
        return path

    @property
    def is_production(self) -> bool:
        return self.environment.lower() == "production"

    @property
    def ledger_path(self) -> Path:
        return self.data_directory / self.ledger_filename

    def game_tuning(self) -> GameTuning:
        """Build the simulation constants from these settings."""

        return GameTuning(
            gravity=self.gravity,
            jump_impulse=self.jump_impulse,
            ground_tolerance=self.ground_tolerance,
            base_speed=self.base_speed,
            speed_increment=self.speed_increment,
            field_width=self.field_width,
            min_obstacle_distance=self.min_obstacle_distance,
            max_obstacle_distance=self.max_obstacle_distance,
            obstacle_width=self.obstacle_width,
            obstacle_height=self.obstacle_height,
            player_size=self.player_size,
            player_slot=self.player_slot,
            hitbox_scale=self.hitbox_scale,
            background_wrap=self.background_wrap,
            tick_interval_seconds=self.tick_interval_seconds,
        )


@lru_cache()
def get_settings() -> BudgetJumpSettings:
    """Return cached settings, ensuring consistent configuration across modules."""

    return BudgetJumpSettings()
