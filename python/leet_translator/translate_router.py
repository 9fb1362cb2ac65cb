import logging
from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse, PlainTextResponse

from leet_translator.config import get_gemini_config
from leet_translator.gemini_client import GeminiClient, extract_translation
from leet_translator.prompts import build_prompt
from leet_translator.schemas import ErrorResponse, TranslateMode, TranslateRequest, TranslationResponse

logging.basicConfig(level=logging.INFO, format='%(asctime)s [%(levelname)s] %(name)s - %(message)s')
logger = logging.getLogger("LeetTranslator.Router")

router = APIRouter()

# Non-POST methods must still reach the handler: they get a plain-text 405.
ALL_METHODS = ["GET", "HEAD", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"]

MISSING_KEY_MESSAGE = "GEMINI_API_KEY is not set"


class RequestError(Exception):
    """Client input error; answered with 400 before the upstream is contacted."""


def _error(message: str, status_code: int) -> JSONResponse:
    return JSONResponse(ErrorResponse(error=message).model_dump(), status_code=status_code)


def parse_request(data, bidirectional: bool) -> TranslateRequest:
    """
    Validates an already-decoded JSON body.
    A null body is not a client error: it raises TypeError for the catch-all.
    Single-direction requests always translate from leet; `mode` is not read.
    """
    if data is None:
        raise TypeError("Cannot read 'text' of a null request body")
    if not isinstance(data, dict):
        data = {}

    text = data.get("text")
    if not bidirectional:
        if not text or not isinstance(text, str):
            raise RequestError("No text provided")
        return TranslateRequest(text=text, mode=TranslateMode.FROM_LEET)

    mode = data.get("mode")
    if not text or not isinstance(text, str) or not mode:
        raise RequestError("No text or mode provided")
    try:
        mode = TranslateMode(mode)
    except ValueError:
        raise RequestError(f"Invalid mode: {mode!r} (expected 'toLeet' or 'fromLeet')")
    return TranslateRequest(text=text, mode=mode)


async def handle_translation(request: Request, config: dict, bidirectional: bool):
    # 1. Method gate
    if request.method != "POST":
        return PlainTextResponse("Method Not Allowed", status_code=405)

    # 2. Config gate
    if not config.get('api_key'):
        logger.error(f"[*] {MISSING_KEY_MESSAGE}")
        return _error(MISSING_KEY_MESSAGE, 500)

    try:
        # 3. Parse & validate
        try:
            req = parse_request(await request.json(), bidirectional)
        except RequestError as e:
            return _error(str(e), 400)

        logger.info(f"[*] Translate Request: mode={req.mode.value}, length={len(req.text)}")

        # 4-6. Prompt + upstream
        client = GeminiClient.from_config(config)
        result = await client.generate_content(build_prompt(req.text, req.mode))
        if not result.ok:
            return _error(result.error or "Gemini API error", 500)

        # 7-8. Extract
        translation = extract_translation(result.data)
        return JSONResponse(TranslationResponse(translation=translation).model_dump(), status_code=200)

    except Exception as e:
        logger.error(f"[*] Error in translate handler: {str(e)}", exc_info=True)
        return _error(str(e) or type(e).__name__, 500)


@router.api_route("/api/chat", methods=ALL_METHODS)
async def chat_endpoint(request: Request, config: dict = Depends(get_gemini_config)):
    """Leet speak -> English. Body: {"text": "H3110 W0r1d"}"""
    return await handle_translation(request, config, bidirectional=False)


@router.api_route("/api/translate", methods=ALL_METHODS)
async def translate_endpoint(request: Request, config: dict = Depends(get_gemini_config)):
    """Either direction. Body: {"text": "...", "mode": "toLeet" | "fromLeet"}"""
    return await handle_translation(request, config, bidirectional=True)
