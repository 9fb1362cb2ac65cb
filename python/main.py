import argparse
import sys
import os
import logging
import socket

sys.path.append(os.path.dirname(os.path.abspath(__file__)))

from leet_translator.api_server import run_api_server
from leet_translator.config import get_gemini_config

logging.basicConfig(level=logging.INFO, format='%(asctime)s [%(levelname)s] %(name)s - %(message)s')
logger = logging.getLogger("LeetTranslator.Main")

def get_free_port():
    with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as s:
        s.bind(('', 0))
        return s.getsockname()[1]

def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Leet speak <-> English translation API (Gemini)")
    parser.add_argument("--host", type=str, default="127.0.0.1")
    parser.add_argument("--port", type=int, default=8000, help="0 picks a free port")
    parser.add_argument("--log-level", type=str, default="info",
                        choices=["critical", "error", "warning", "info", "debug"])
    return parser.parse_args(argv)

def main(argv=None):
    args = parse_args(argv)

    logging.getLogger().setLevel(args.log_level.upper())

    port = args.port
    if not port or port <= 0:
        port = get_free_port()

    logger.info(f"Allocated API Port: {port}")

    # Key is re-read per request
    if not get_gemini_config().get('api_key'):
        logger.warning("GEMINI_API_KEY is not set. Every translation request will fail with 500.")

    logger.info(f"Leet Translator listening on http://{args.host}:{port}")
    try:
        run_api_server(port, host=args.host, log_level=args.log_level)
    except KeyboardInterrupt:
        logger.info("User interrupted.")

if __name__ == "__main__":
    main()
