from pydantic import BaseModel, ConfigDict

class ChatPrompt(BaseModel):
    prompt: str

class ChatResponse(BaseModel):
    response: str

# --- формат Ollama /api/generate ---

class GenerateRequest(BaseModel):
    model: str
    prompt: str
    stream: bool = False

class GenerateResponse(BaseModel):
    # Ollama шлёт ещё model, done, *_duration и т.д. — они нам не нужны
    response: str | None = ""

    model_config = ConfigDict(extra="ignore")
