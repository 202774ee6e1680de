"""Tests for the TtsProvider enum and tag parsing helpers."""

from __future__ import annotations

import importlib
import json
import typing

import pytest

from ttskit.speech.tts import (
    TTS_PROVIDER_VALUES,
    InvalidProviderTagError,
    TTSError,
    TtsProvider,
    TtsProviderName,
    is_tts_provider,
    parse_tts_provider,
    supported_tts_providers,
)


class TestTtsProviderEnum:
    """Tests for the TtsProvider enum."""

    def test_exactly_two_providers(self) -> None:
        """Verify the provider set is closed to baseten and vertex."""
        values = [p.value for p in TtsProvider]

        assert len(values) == 2
        assert set(values) == {"baseten", "vertex"}

    def test_provider_value_access(self) -> None:
        """Test accessing enum values."""
        assert TtsProvider.BASETEN.value == "baseten"
        assert TtsProvider.VERTEX.value == "vertex"

    def test_members_compare_equal_to_strings(self) -> None:
        """Members behave as their raw string values."""
        assert TtsProvider.BASETEN == "baseten"
        assert TtsProvider.VERTEX == "vertex"

    def test_str_yields_raw_value(self) -> None:
        """str() serializes to the bare tag."""
        assert str(TtsProvider.BASETEN) == "baseten"
        assert f"{TtsProvider.VERTEX}" == "vertex"

    def test_json_serializes_as_string(self) -> None:
        """Members serialize as plain JSON strings."""
        assert json.dumps({"provider": TtsProvider.VERTEX}) == '{"provider": "vertex"}'

    def test_provider_values_constant(self) -> None:
        """TTS_PROVIDER_VALUES mirrors the enum values."""
        assert TTS_PROVIDER_VALUES == frozenset({"baseten", "vertex"})

    def test_supported_providers_in_declaration_order(self) -> None:
        """Listing keeps declaration order."""
        assert supported_tts_providers() == ["baseten", "vertex"]

    def test_literal_type_matches_enum_values(self) -> None:
        """TtsProviderName admits exactly the enum values, in order."""
        assert list(typing.get_args(TtsProviderName)) == supported_tts_providers()

    def test_reload_yields_equal_values(self) -> None:
        """Re-executing the module declares the same tag strings."""
        module = importlib.import_module("ttskit.speech.tts.provider")
        saved = dict(vars(module))
        try:
            reloaded = importlib.reload(module)
            assert [p.value for p in reloaded.TtsProvider] == supported_tts_providers()
            assert reloaded.TtsProvider.BASETEN == TtsProvider.BASETEN == "baseten"
            assert reloaded.TtsProvider.VERTEX == TtsProvider.VERTEX == "vertex"
        finally:
            vars(module).update(saved)


class TestParseTtsProvider:
    """Tests for parse_tts_provider."""

    @pytest.mark.parametrize("provider", list(TtsProvider))
    def test_string_round_trip(self, provider: TtsProvider) -> None:
        """Serializing then parsing yields the same member."""
        assert parse_tts_provider(str(provider)) is provider

    def test_member_passes_through(self) -> None:
        """An existing member is returned unchanged."""
        assert parse_tts_provider(TtsProvider.VERTEX) is TtsProvider.VERTEX

    @pytest.mark.parametrize(
        "value",
        ["azure", "", "BASETEN", "Vertex", " baseten", "vertex ", None, 1, b"vertex"],
    )
    def test_rejects_values_outside_set(self, value: object) -> None:
        """Anything other than the exact tags is rejected."""
        with pytest.raises(InvalidProviderTagError) as exc_info:
            parse_tts_provider(value)

        assert exc_info.value.value == value
        assert exc_info.value.allowed == ("baseten", "vertex")

    def test_error_message_lists_allowed_tags(self) -> None:
        """The error names the rejected value and the allowed tags."""
        with pytest.raises(InvalidProviderTagError, match="'azure'.*baseten, vertex"):
            parse_tts_provider("azure")

    def test_error_hierarchy(self) -> None:
        """InvalidProviderTagError is both a TTSError and a ValueError."""
        with pytest.raises(TTSError):
            parse_tts_provider("azure")
        with pytest.raises(ValueError):
            parse_tts_provider("azure")


class TestIsTtsProvider:
    """Tests for is_tts_provider."""

    def test_accepts_valid_tags(self) -> None:
        """Valid tags and members are recognized."""
        assert is_tts_provider("baseten") is True
        assert is_tts_provider("vertex") is True
        assert is_tts_provider(TtsProvider.BASETEN) is True

    def test_rejects_invalid_tags(self) -> None:
        """Invalid values return False instead of raising."""
        assert is_tts_provider("azure") is False
        assert is_tts_provider("") is False
        assert is_tts_provider(None) is False
