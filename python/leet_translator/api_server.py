import uvicorn
from fastapi import FastAPI, Request
from fastapi.exception_handlers import http_exception_handler
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import PlainTextResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from leet_translator.translate_router import router as translate_router

app = FastAPI(title="Leet Translator")

# Browser frontends call this from other origins
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=False,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(translate_router)


@app.exception_handler(StarletteHTTPException)
async def method_not_allowed_handler(request: Request, exc: StarletteHTTPException):
    """405 is always plain text, including methods the router does not list (TRACE, WebDAV verbs...)"""
    if exc.status_code == 405:
        return PlainTextResponse("Method Not Allowed", status_code=405)
    return await http_exception_handler(request, exc)


@app.get("/health")
async def health_check():
    return {"status": "ok", "service": "leet_translator"}


def run_api_server(port: int, host: str = "127.0.0.1", log_level: str = "info"):
    uvicorn.run(app, host=host, port=port, log_level=log_level)
