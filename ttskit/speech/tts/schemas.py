"""Pydantic schemas for custom TTS provider integration.

Validates the provider tag and model a caller selects, and describes the
provider catalog served by the API.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from ttskit.speech.tts.provider import TtsProvider, TtsProviderName, parse_tts_provider

# Baseten only serves custom TTS through this model
BASETEN_REQUIRED_MODEL = "mars-8-pro"

_REQUIRED_MODELS: dict[TtsProvider, str | None] = {
    TtsProvider.BASETEN: BASETEN_REQUIRED_MODEL,
    TtsProvider.VERTEX: None,
}


class CustomTtsProviderConfig(BaseModel):
    """Schema for a caller-selected TTS provider and model."""

    provider: TtsProvider = Field(..., description="TTS provider tag (baseten/vertex)")
    model: str | None = Field(None, max_length=200, description="Provider model identifier")

    model_config = ConfigDict(extra="forbid")

    @field_validator("provider", mode="before")
    @classmethod
    def validate_provider(cls, v: Any) -> TtsProvider:
        """Accept only the exact provider tags."""
        return parse_tts_provider(v)

    @field_validator("model")
    @classmethod
    def normalize_model(cls, v: str | None) -> str | None:
        """Strip whitespace; treat blank as unset."""
        if v is None:
            return None
        v = v.strip()
        return v or None

    @model_validator(mode="after")
    def check_required_model(self) -> CustomTtsProviderConfig:
        """Baseten must use its required model."""
        required = _REQUIRED_MODELS[self.provider]
        if required is None:
            return self
        if self.model is None:
            self.model = required
        elif self.model != required:
            raise ValueError(
                f"Provider '{self.provider.value}' requires model '{required}', "
                f"got '{self.model}'"
            )
        return self


class TtsProviderInfo(BaseModel):
    """Catalog entry describing one supported provider."""

    name: TtsProvider
    required_model: str | None = None


def get_provider_info(value: TtsProviderName | TtsProvider) -> TtsProviderInfo:
    """Look up the catalog entry for a provider tag.

    Raises:
        InvalidProviderTagError: If the value is not a supported tag.
    """
    provider = parse_tts_provider(value)
    return TtsProviderInfo(name=provider, required_model=_REQUIRED_MODELS[provider])


def provider_catalog() -> list[TtsProviderInfo]:
    """List every supported provider in declaration order."""
    return [get_provider_info(p) for p in TtsProvider]
