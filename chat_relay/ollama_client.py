# chat_relay/ollama_client.py
import logging
import anyio
import httpx
from pydantic import ValidationError
from .errors import OllamaResponseError, OllamaStatusError, OllamaUnavailableError
from .schemas import GenerateRequest, GenerateResponse
from .settings import Settings

logger = logging.getLogger(__name__)

GENERATE_PATH = "/api/generate"

def build_http_client(
    settings: Settings,
    transport: httpx.AsyncBaseTransport | None = None,
) -> httpx.AsyncClient:
    """Один клиент на процесс: base_url и таймаут берутся из настроек."""
    return httpx.AsyncClient(
        base_url=settings.OLLAMA_URL,
        timeout=settings.OLLAMA_TIMEOUT,
        transport=transport,
    )

class OllamaClient:
    def __init__(self, http: httpx.AsyncClient, model: str, timeout: float):
        self.http = http
        self.model = model
        self.timeout = timeout  # дедлайн на весь обмен, а не на отдельную фазу httpx

    async def generate(self, prompt: str) -> str:
        """
        Неблокирующий вызов /api/generate (без стриминга).
        Без ретраев: любая ошибка сразу уходит вызывающему.
        """
        payload = GenerateRequest(model=self.model, prompt=prompt, stream=False)
        try:
            with anyio.fail_after(self.timeout):
                resp = await self.http.post(GENERATE_PATH, json=payload.model_dump())
        except TimeoutError as e:
            cause = TimeoutError(f"no answer within {self.timeout:g}s")
            logger.error("Error connecting to Ollama: %s", cause)
            raise OllamaUnavailableError(cause) from e
        except httpx.HTTPError as e:
            logger.error("Error connecting to Ollama: %s", e)
            raise OllamaUnavailableError(e) from e

        body = resp.text
        if resp.status_code != httpx.codes.OK:
            logger.error("Ollama responded with status %d: %s", resp.status_code, body)
            raise OllamaStatusError(resp.status_code, body)

        try:
            parsed = GenerateResponse.model_validate_json(resp.content)
        except ValidationError as e:
            logger.error("Failed to parse Ollama response: %s", body)
            raise OllamaResponseError(e, body) from e
        # null в поле response — это пустой ответ, а не ошибка
        return parsed.response or ""
