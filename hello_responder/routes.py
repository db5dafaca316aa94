# hello_responder/routes.py
import socket
from datetime import datetime, timezone
from fastapi import APIRouter, Request
from fastapi.responses import PlainTextResponse
from .schemas import Greeting

router = APIRouter()

@router.get("/health", response_class=PlainTextResponse)
async def health():
    return "OK"

# catch-all: отвечаем на любой путь, путь попадает в ответ
@router.get("/{path:path}", response_model=Greeting)
async def hello(request: Request):
    return Greeting(
        message=request.app.state.settings.GREETING,
        hostname=socket.gethostname(),
        path=request.url.path,
        timestamp=datetime.now(timezone.utc),
    )
