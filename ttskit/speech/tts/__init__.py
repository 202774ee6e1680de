"""Text-to-speech provider selection."""

from ttskit.speech.tts.errors import (
    InvalidProviderTagError,
    TTSConfigurationError,
    TTSError,
)
from ttskit.speech.tts.provider import (
    TTS_PROVIDER_VALUES,
    TtsProvider,
    TtsProviderName,
    is_tts_provider,
    parse_tts_provider,
    supported_tts_providers,
)
from ttskit.speech.tts.schemas import (
    BASETEN_REQUIRED_MODEL,
    CustomTtsProviderConfig,
    TtsProviderInfo,
    get_provider_info,
    provider_catalog,
)

__all__ = [
    "BASETEN_REQUIRED_MODEL",
    "CustomTtsProviderConfig",
    "InvalidProviderTagError",
    "TTSConfigurationError",
    "TTSError",
    "TTS_PROVIDER_VALUES",
    "TtsProvider",
    "TtsProviderInfo",
    "TtsProviderName",
    "get_provider_info",
    "is_tts_provider",
    "parse_tts_provider",
    "provider_catalog",
    "supported_tts_providers",
]
