"""Exceptions raised by the TTS provider helpers."""

from __future__ import annotations

from typing import Any


class TTSError(Exception):
    """Base exception for TTS-related errors."""

    pass


class InvalidProviderTagError(TTSError, ValueError):
    """Raised when a value is not one of the supported TTS provider tags.

    Attributes:
        value: The rejected value, as supplied by the caller.
        allowed: The provider tags that would have been accepted.
    """

    def __init__(self, value: Any, allowed: tuple[str, ...]) -> None:
        self.value = value
        self.allowed = allowed
        super().__init__(
            f"Invalid TTS provider {value!r}. "
            f"Expected one of: {', '.join(allowed)}"
        )


class TTSConfigurationError(TTSError):
    """Raised when a custom TTS provider configuration is inconsistent."""

    pass
