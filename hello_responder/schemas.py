from datetime import datetime
from pydantic import BaseModel

class Greeting(BaseModel):
    message: str
    hostname: str
    path: str
    timestamp: datetime
