import logging
from contextlib import asynccontextmanager
import httpx
import uvicorn
from fastapi import FastAPI
from starlette.exceptions import HTTPException as StarletteHTTPException
from .errors import plain_text_http_error
from .ollama_client import OllamaClient, build_http_client
from .routes import router as chat_router
from .settings import Settings, settings

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s - %(levelname)s - %(name)s - %(message)s"

def create_app(
    cfg: Settings | None = None,
    transport: httpx.AsyncBaseTransport | None = None,
) -> FastAPI:
    cfg = cfg or settings

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        # Один HTTP-клиент на всё приложение, закрываем при остановке
        http = build_http_client(cfg, transport=transport)
        app.state.ollama = OllamaClient(http, model=cfg.OLLAMA_MODEL, timeout=cfg.OLLAMA_TIMEOUT)
        logger.info("Relaying chat to %s (model %s)", cfg.OLLAMA_URL, cfg.OLLAMA_MODEL)
        yield
        await http.aclose()

    app = FastAPI(title="Chat relay for Ollama", lifespan=lifespan)
    app.add_exception_handler(StarletteHTTPException, plain_text_http_error)
    app.include_router(chat_router, tags=["chat"])
    return app

app = create_app()

def run():
    logging.basicConfig(level=settings.LOG_LEVEL.upper(), format=LOG_FORMAT)
    logger.info("Chat relay starting on %s:%s", settings.HOST, settings.PORT)
    # при ошибке bind uvicorn сам пишет в лог и завершает процесс с кодом 1
    uvicorn.run(app, host=settings.HOST, port=settings.PORT, log_level=settings.LOG_LEVEL.lower())

if __name__ == "__main__":
    run()
