"""
Configuration management using Pydantic Settings.
Reads from environment variables.
"""

from dataclasses import dataclass

from pydantic import ConfigDict, Field
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings."""

    model_config = ConfigDict(env_file=".env", case_sensitive=False)

    # Application Configuration
    environment: str = Field(default="development", alias="ENVIRONMENT")
    log_level: str = Field(default="INFO", alias="LOG_LEVEL")

    # Balance policy
    max_pto_hours: float = Field(default=210, alias="MAX_PTO_HOURS")
    max_sick_hours: float = Field(default=80, alias="MAX_SICK_HOURS")
    pto_floor_hours: float = Field(default=-40, alias="PTO_FLOOR_HOURS")
    sick_warning_floor_hours: float = Field(default=-16, alias="SICK_WARNING_FLOOR_HOURS")
    hours_per_day: float = Field(default=8, alias="HOURS_PER_DAY")

    # Default form inputs
    default_current_pto: str = Field(default="80", alias="DEFAULT_CURRENT_PTO")
    default_current_sick: str = Field(default="40", alias="DEFAULT_CURRENT_SICK")
    default_pto_rate: str = Field(default=f"{140 / 2081:.4f}", alias="DEFAULT_PTO_RATE")
    default_sick_rate: str = Field(default=f"{1 / 30:.4f}", alias="DEFAULT_SICK_RATE")


@dataclass(frozen=True)
class ProjectionPolicy:
    """Ceilings, PTO floor and the length of a workday / vacation day, in hours."""

    max_pto: float = 210
    max_sick: float = 80
    pto_floor: float = -40
    hours_per_day: float = 8

    @classmethod
    def from_settings(cls, settings: Settings) -> "ProjectionPolicy":
        return cls(
            max_pto=settings.max_pto_hours,
            max_sick=settings.max_sick_hours,
            pto_floor=settings.pto_floor_hours,
            hours_per_day=settings.hours_per_day,
        )


# Global settings instance
settings = Settings()
