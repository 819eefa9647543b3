from unittest.mock import patch

import pytest

from services import gemini_client
from services.gemini_client import strip_code_fences


def test_strip_code_fences_json_block():
    text = '```json\n{"a": 1}\n```'
    assert strip_code_fences(text) == '{"a": 1}'


def test_strip_code_fences_plain_text_untouched():
    assert strip_code_fences('  ["x", "y"]  ') == '["x", "y"]'


def test_get_client_without_key_returns_none():
    with patch.object(gemini_client.settings, "gemini_api_key", ""):
        assert gemini_client.get_client() is None


@pytest.mark.asyncio
@patch("services.gemini_client.generate_text")
async def test_generate_json_parses_fenced_response(mock_text):
    mock_text.return_value = '```json\n["Built X", "Led Y"]\n```'
    assert await gemini_client.generate_json("prompt") == ["Built X", "Led Y"]


@pytest.mark.asyncio
@patch("services.gemini_client.generate_text")
async def test_generate_json_invalid_returns_none(mock_text):
    mock_text.return_value = "Sure! Here are your bullets."
    assert await gemini_client.generate_json("prompt") is None


@pytest.mark.asyncio
async def test_generate_text_without_client_returns_none():
    with patch.object(gemini_client.settings, "gemini_api_key", ""):
        assert await gemini_client.generate_text("prompt") is None
