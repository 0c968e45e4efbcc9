"""Pydantic schema for engine configuration."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from pandaloterias.engine.modality import DEFAULT_ALIASES, Modality


class EngineConfig(BaseModel):
    """Validated parser configuration with defaults."""

    model_config = ConfigDict(extra="forbid")

    aliases: dict[str, Modality] = Field(default_factory=lambda: dict(DEFAULT_ALIASES))
    group_min: int = Field(default=1, ge=1)
    group_max: int = Field(default=25, ge=1)
    group_pad_width: int = Field(default=2, ge=1, le=4)

    @field_validator("aliases")
    @classmethod
    def _normalize_alias_keys(cls, values: dict[str, Modality]) -> dict[str, Modality]:
        normalized: dict[str, Modality] = {}
        for key, modality in values.items():
            alias = key.strip().upper()
            if not alias.isalnum():
                raise ValueError(f"alias '{key}' must be a single alphanumeric token.")
            normalized[alias] = modality
        return normalized

    @model_validator(mode="after")
    def _check_group_range(self) -> EngineConfig:
        if self.group_min > self.group_max:
            raise ValueError("group_min cannot be greater than group_max.")
        return self
