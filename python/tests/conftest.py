"""
Pytest configuration and shared fixtures for Leet Translator tests.
"""
import os
import sys
import pytest
import httpx
from unittest.mock import AsyncMock, patch

# Add python directory to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

GEMINI_URL = "https://generativelanguage.googleapis.com/v1beta/models/gemini-2.5-flash:generateContent"


def make_response(status_code=200, json_body=None, text=None):
    """Build a real httpx.Response the way the upstream would return it."""
    request = httpx.Request("POST", GEMINI_URL)
    if json_body is not None:
        return httpx.Response(status_code, json=json_body, request=request)
    return httpx.Response(status_code, text=text or "", request=request)


@pytest.fixture
def gemini_config():
    """Return a complete upstream config dictionary."""
    return {
        "api_key": "test-key",
        "model": "gemini-2.5-flash",
        "base_url": "https://generativelanguage.googleapis.com/v1beta",
        "timeout": None,
    }


@pytest.fixture
def sample_gemini_response():
    """Return a well-formed generateContent response."""
    return {
        "candidates": [
            {
                "content": {
                    "parts": [{"text": "  Hello World  "}],
                    "role": "model"
                },
                "finishReason": "STOP",
                "index": 0
            }
        ],
        "usageMetadata": {"promptTokenCount": 42, "candidatesTokenCount": 3}
    }


@pytest.fixture
def mock_async_client():
    """
    Patch httpx.AsyncClient inside gemini_client.
    Set `.post.return_value` / `.post.side_effect` on the yielded instance.
    """
    with patch('leet_translator.gemini_client.httpx.AsyncClient') as mock_client:
        mock_client_instance = AsyncMock()
        mock_client.return_value.__aenter__.return_value = mock_client_instance
        mock_client.return_value.__aexit__.return_value = False
        yield mock_client_instance


@pytest.fixture
def clean_env(monkeypatch, tmp_path):
    """Strip Gemini env vars and point the config file at an empty temp dir."""
    for key in ("GEMINI_API_KEY", "GEMINI_MODEL", "GEMINI_BASE_URL", "GEMINI_TIMEOUT"):
        monkeypatch.delenv(key, raising=False)
    monkeypatch.setenv("LEET_CONFIG_PATH", str(tmp_path / "missing.json"))
    return tmp_path
