import logging
import httpx
from dataclasses import dataclass, field
from typing import Any, Dict, Optional
from pydantic import ValidationError

from leet_translator.config import DEFAULT_BASE_URL, DEFAULT_MODEL
from leet_translator.schemas import Content, GeminiRequest, GeminiResponse, Part, SafetySetting

logger = logging.getLogger("LeetTranslator.Gemini")

FALLBACK_TRANSLATION = "Translation not found."

SAFETY_CATEGORIES = [
    "HARM_CATEGORY_HARASSMENT",
    "HARM_CATEGORY_HATE_SPEECH",
    "HARM_CATEGORY_SEXUALLY_EXPLICIT",
    "HARM_CATEGORY_DANGEROUS_CONTENT",
]

@dataclass
class GeminiResult:
    """Outcome of a single generateContent call"""
    ok: bool
    data: Dict[str, Any] = field(default_factory=dict)
    error: Optional[str] = None
    status_code: Optional[int] = None

    @classmethod
    def success(cls, data, status_code=200):
        return cls(ok=True, data=data, status_code=status_code)

    @classmethod
    def failure(cls, error, status_code=None):
        return cls(ok=False, error=error, status_code=status_code)


def build_request_body(prompt: str) -> dict:
    body = GeminiRequest(
        contents=[Content(parts=[Part(text=prompt)])],
        safety_settings=[SafetySetting(category=c) for c in SAFETY_CATEGORIES],
    )
    return body.model_dump(by_alias=True, exclude_none=True)


def _error_message(response: httpx.Response) -> str:
    """Prefer the upstream's own {"error": {"message": ...}}; fall back to the status line."""
    try:
        message = response.json().get("error", {}).get("message")
        if message:
            return str(message)
    except (ValueError, AttributeError):
        pass
    return f"Gemini API error: {response.status_code} {response.reason_phrase}".rstrip()


def extract_translation(data) -> str:
    """
    candidates[0].content.parts[0].text, trimmed.
    Any missing or malformed link yields FALLBACK_TRANSLATION instead of an error.
    """
    try:
        parsed = GeminiResponse.model_validate(data)
    except ValidationError as e:
        logger.warning(f"Unexpected Gemini response shape: {e.error_count()} validation error(s)")
        return FALLBACK_TRANSLATION

    text = parsed.first_text()
    if not text:
        block_reason = parsed.prompt_feedback.block_reason if parsed.prompt_feedback else None
        finish_reason = parsed.candidates[0].finish_reason if parsed.candidates else None
        if block_reason or finish_reason:
            logger.warning(f"Gemini returned no translation (blockReason={block_reason}, finishReason={finish_reason})")
        else:
            logger.warning("Gemini returned no translation text")
        return FALLBACK_TRANSLATION
    return text.strip()


class GeminiClient:
    def __init__(self, api_key: str, model: str = DEFAULT_MODEL, base_url: str = DEFAULT_BASE_URL,
                 timeout: Optional[float] = None):
        self.api_key = api_key
        self.model = model
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout

    @classmethod
    def from_config(cls, config: dict) -> "GeminiClient":
        return cls(
            api_key=config.get('api_key', ""),
            model=config.get('model') or DEFAULT_MODEL,
            base_url=config.get('base_url') or DEFAULT_BASE_URL,
            timeout=config.get('timeout'),
        )

    @property
    def endpoint(self) -> str:
        return f"{self.base_url}/models/{self.model}:generateContent"

    async def generate_content(self, prompt: str) -> GeminiResult:
        """Single attempt; no retry. Failures come back as GeminiResult.failure."""
        payload = build_request_body(prompt)
        headers = {"Content-Type": "application/json"}

        logger.info(f"[*] Gemini Request: model={self.model}")

        async with httpx.AsyncClient(timeout=self.timeout) as client:
            try:
                resp = await client.post(self.endpoint, params={"key": self.api_key}, json=payload, headers=headers)
            except httpx.HTTPError as e:
                logger.error(f"[*] Gemini Transport Error: {type(e).__name__}: {e}")
                return GeminiResult.failure(str(e) or type(e).__name__)

        if not resp.is_success:
            message = _error_message(resp)
            logger.error(f"[*] Gemini Error ({resp.status_code}): {message}")
            return GeminiResult.failure(message, status_code=resp.status_code)

        try:
            data = resp.json()
        except ValueError as e:
            logger.error(f"[*] Gemini returned invalid JSON: {e}")
            return GeminiResult.failure(f"Invalid JSON from Gemini API: {e}", status_code=resp.status_code)

        return GeminiResult.success(data, status_code=resp.status_code)
