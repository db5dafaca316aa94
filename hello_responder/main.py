import logging
import uvicorn
from fastapi import FastAPI
from .routes import router as hello_router
from .settings import Settings, settings

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s - %(levelname)s - %(name)s - %(message)s"

def create_app(cfg: Settings | None = None) -> FastAPI:
    app = FastAPI(title="Hello responder")
    app.state.settings = cfg or settings
    app.include_router(hello_router, tags=["hello"])
    return app

app = create_app()

def run():
    logging.basicConfig(level=settings.LOG_LEVEL.upper(), format=LOG_FORMAT)
    logger.info("Hello responder starting on %s:%s", settings.HOST, settings.PORT)
    # при ошибке bind uvicorn сам пишет в лог и завершает процесс с кодом 1
    uvicorn.run(app, host=settings.HOST, port=settings.PORT, log_level=settings.LOG_LEVEL.lower())

if __name__ == "__main__":
    run()
