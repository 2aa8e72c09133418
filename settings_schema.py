from typing import Literal

from pydantic import BaseModel, ValidationError, field_validator


class SettingsSchema(BaseModel):
    weight_unit: Literal["lbs", "kg"] = "lbs"
    rest_timer_seconds: int = 90
    weight_increment: float = 5.0
    log_level: str = "INFO"
    log_format: Literal["console", "json"] = "console"

    @field_validator("rest_timer_seconds")
    @classmethod
    def _positive_rest(cls, value: int) -> int:
        if value <= 0:
            raise ValueError("rest_timer_seconds must be positive")
        return value

    @field_validator("weight_increment")
    @classmethod
    def _positive_increment(cls, value: float) -> float:
        if value <= 0:
            raise ValueError("weight_increment must be positive")
        return value

    @field_validator("log_level")
    @classmethod
    def _upper_level(cls, value: str) -> str:
        level = value.upper()
        if level not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
            raise ValueError(f"unknown log level {value!r}")
        return level


def validate_settings(data: dict) -> SettingsSchema:
    try:
        return SettingsSchema(**data)
    except ValidationError as e:
        raise ValueError(str(e))
