"""Environment configuration for the custom TTS provider.

Environment Variables:
    TTS_PROVIDER: Provider tag (baseten or vertex). Unset means no custom provider.
    TTS_MODEL: Optional model identifier for the selected provider.
"""

from __future__ import annotations

import logging
import os
from collections.abc import Mapping

from pydantic import ValidationError

from ttskit.speech.tts.errors import InvalidProviderTagError, TTSConfigurationError
from ttskit.speech.tts.provider import parse_tts_provider
from ttskit.speech.tts.schemas import CustomTtsProviderConfig

logger = logging.getLogger(__name__)


def load_tts_provider_config(
    environ: Mapping[str, str] | None = None,
) -> CustomTtsProviderConfig | None:
    """Build the custom TTS provider config from the environment.

    Args:
        environ: Mapping to read from. Defaults to os.environ.

    Returns:
        The validated config, or None when TTS_PROVIDER is unset or empty.

    Raises:
        InvalidProviderTagError: If TTS_PROVIDER is not a supported tag.
        TTSConfigurationError: If TTS_MODEL does not fit the provider.
    """
    env = os.environ if environ is None else environ
    raw_provider = env.get("TTS_PROVIDER", "")
    if not raw_provider:
        logger.debug("TTS_PROVIDER not set, no custom TTS provider configured")
        return None

    try:
        provider = parse_tts_provider(raw_provider)
    except InvalidProviderTagError:
        logger.warning("Rejected TTS_PROVIDER value %r", raw_provider)
        raise

    model = env.get("TTS_MODEL") or None
    try:
        config = CustomTtsProviderConfig(provider=provider, model=model)
    except ValidationError as e:
        logger.warning("Rejected TTS_MODEL %r for provider %s", model, provider)
        raise TTSConfigurationError(
            f"Invalid TTS configuration for provider '{provider}': "
            f"{e.errors()[0]['msg']}"
        ) from e

    logger.info("Custom TTS provider: %s (model=%s)", config.provider, config.model)
    return config
