import os
import json
import logging
from typing import Optional
from dotenv import load_dotenv

logger = logging.getLogger("LeetTranslator.Config")

load_dotenv()

DEFAULT_MODEL = "gemini-2.5-flash"
DEFAULT_BASE_URL = "https://generativelanguage.googleapis.com/v1beta"
DEFAULT_CONFIG_PATH = os.path.abspath(os.path.join(os.path.dirname(__file__), '../../config/config.json'))

def _parse_timeout(value) -> Optional[float]:
    if value is None or value == "":
        return None
    try:
        return float(value)
    except (TypeError, ValueError):
        logger.warning(f"Ignoring invalid Gemini timeout value: {value!r}")
        return None

def get_gemini_config() -> dict:
    """
    Reads upstream settings on every call: config.json ("gemini" section),
    then environment variables on top. Nothing is cached.
    """
    config_data = {}
    config_path = os.getenv("LEET_CONFIG_PATH", DEFAULT_CONFIG_PATH)
    try:
        with open(config_path, 'r', encoding='utf-8') as f:
            data = json.load(f)
            config_data = dict(data.get('gemini', {}))
    except (OSError, ValueError, TypeError, AttributeError):
        pass

    env_api_key = os.getenv("GEMINI_API_KEY")
    if env_api_key: config_data['api_key'] = env_api_key
    env_model = os.getenv("GEMINI_MODEL")
    if env_model: config_data['model'] = env_model
    env_base_url = os.getenv("GEMINI_BASE_URL")
    if env_base_url: config_data['base_url'] = env_base_url
    env_timeout = os.getenv("GEMINI_TIMEOUT")
    if env_timeout: config_data['timeout'] = env_timeout

    config_data.setdefault('api_key', "")
    config_data.setdefault('model', DEFAULT_MODEL)
    config_data.setdefault('base_url', DEFAULT_BASE_URL)
    config_data['timeout'] = _parse_timeout(config_data.get('timeout'))
    return config_data
