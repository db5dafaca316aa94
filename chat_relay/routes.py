# chat_relay/routes.py
import logging
from fastapi import APIRouter, HTTPException, Request, status
from fastapi.responses import HTMLResponse, PlainTextResponse
from pydantic import ValidationError
from .errors import OllamaError
from .ollama_client import OllamaClient
from .page import INDEX_HTML
from .schemas import ChatPrompt, ChatResponse

logger = logging.getLogger(__name__)

router = APIRouter()

def get_ollama(request: Request) -> OllamaClient:
    return request.app.state.ollama

@router.get("/", response_class=HTMLResponse)
async def index():
    return HTMLResponse(INDEX_HTML)

@router.get("/health", response_class=PlainTextResponse)
async def health():
    return "OK"

@router.post("/chat", response_model=ChatResponse)
async def chat(request: Request):
    # тело разбираем сами, чтобы отдать 400 с текстом парсера, а не 422 от FastAPI
    raw = await request.body()
    try:
        req = ChatPrompt.model_validate_json(raw)
    except ValidationError as e:
        logger.warning("Bad chat request: %s", e)
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))

    try:
        text = await get_ollama(request).generate(req.prompt)
    except OllamaError as e:
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=str(e))
    return ChatResponse(response=text)
