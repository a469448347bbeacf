"""
Centralized configuration using pydantic-settings.
Loads from .env file and provides typed access to the trip constants.
"""

from pathlib import Path
from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings


class SimulationSettings(BaseSettings):
    """Wallet and store parameters for the trip."""

    starting_money: float = Field(default=75.0, description="Cash in the wallet when leaving home")
    sales_tax_rate: float = Field(default=0.05, description="Sales tax applied to the grocery subtotal")
    energy_drink_price: float = Field(default=6.0)
    energy_drink_min_money: float = Field(
        default=40.0, description="Drink is bought only if this much is left after checkout"
    )
    money_low_threshold: float = Field(
        default=40.0, description="Below this the ride home counts as 'money low'"
    )
    comfortable_money_threshold: float = Field(
        default=35.0, description="Final balance considered 'plenty left' in the summary"
    )
    seed: Optional[int] = Field(default=None, description="Seed for the binary source (unset = random)")

    model_config = {"env_prefix": "SIM_", "env_file": ".env", "extra": "ignore"}


class PathSettings(BaseSettings):
    """File path configuration."""

    project_root: Path = Field(
        default_factory=lambda: Path(__file__).resolve().parent.parent
    )

    model_config = {"env_prefix": "PATH_", "env_file": ".env", "extra": "ignore"}

    @property
    def output_dir(self) -> Path:
        return self.project_root / "data" / "output"


class LogSettings(BaseSettings):
    """Logging configuration."""

    level: str = Field(default="WARNING", description="DEBUG | INFO | WARNING | ERROR")

    model_config = {"env_prefix": "LOG_", "env_file": ".env", "extra": "ignore"}


class Settings(BaseSettings):
    """Root settings aggregator."""

    simulation: SimulationSettings = Field(default_factory=SimulationSettings)
    paths: PathSettings = Field(default_factory=PathSettings)
    log: LogSettings = Field(default_factory=LogSettings)

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "extra": "ignore",
    }


_settings: Optional[Settings] = None


def get_settings() -> Settings:
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings


def reset_settings() -> None:
    """Drop the cached settings so the next get_settings() re-reads the environment."""
    global _settings
    _settings = None
