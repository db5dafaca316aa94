from fastapi.responses import PlainTextResponse
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.requests import Request


class OllamaError(Exception):
    """Базовая ошибка обращения к Ollama."""


class OllamaUnavailableError(OllamaError):
    def __init__(self, cause: Exception):
        self.cause = cause
        super().__init__(f"Cannot connect to Ollama: {cause}")


class OllamaStatusError(OllamaError):
    def __init__(self, status_code: int, body: str):
        self.status_code = status_code
        self.body = body
        super().__init__(f"Ollama error: {body}")


class OllamaResponseError(OllamaError):
    def __init__(self, cause: Exception, body: str = ""):
        self.cause = cause
        self.body = body
        super().__init__(f"Invalid response from Ollama: {cause}")


async def plain_text_http_error(request: Request, exc: StarletteHTTPException) -> PlainTextResponse:
    # текст ошибки отдаём как есть (text/plain), без JSON-обёртки
    return PlainTextResponse(str(exc.detail), status_code=exc.status_code, headers=exc.headers)
