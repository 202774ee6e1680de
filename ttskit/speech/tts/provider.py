"""Supported TTS providers for custom provider integration.

- ``baseten``: Use Baseten as the TTS provider (requires the mars-8-pro model)
- ``vertex``: Use Google Vertex AI as the TTS provider

The set of providers is closed. Use ``TtsProvider`` to reference a provider
symbolically and ``TtsProviderName`` to annotate fields that hold the raw
string value.
"""

from __future__ import annotations

import enum
from typing import Any, Literal

from ttskit.speech.tts.errors import InvalidProviderTagError


class TtsProvider(str, enum.Enum):
    """Canonical identifiers for every supported TTS backend."""

    BASETEN = "baseten"
    VERTEX = "vertex"

    def __str__(self) -> str:
        return self.value


TtsProviderName = Literal["baseten", "vertex"]

TTS_PROVIDER_VALUES: frozenset[str] = frozenset(p.value for p in TtsProvider)


def supported_tts_providers() -> list[str]:
    """Return the raw provider values in declaration order."""
    return [p.value for p in TtsProvider]


def parse_tts_provider(value: Any) -> TtsProvider:
    """Convert a raw value into a ``TtsProvider``.

    Matching is exact: no case folding or whitespace stripping is applied,
    so ``"BASETEN"`` and ``" vertex"`` are rejected.

    Args:
        value: A provider tag string or an existing ``TtsProvider``.

    Returns:
        The matching TtsProvider member.

    Raises:
        InvalidProviderTagError: If the value is not a supported tag.
    """
    if isinstance(value, TtsProvider):
        return value
    if isinstance(value, str) and value in TTS_PROVIDER_VALUES:
        return TtsProvider(value)
    raise InvalidProviderTagError(value, tuple(supported_tts_providers()))


def is_tts_provider(value: Any) -> bool:
    """Check whether a value is a supported provider tag."""
    try:
        parse_tts_provider(value)
    except InvalidProviderTagError:
        return False
    return True
