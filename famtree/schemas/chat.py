from typing import Any
from pydantic import BaseModel

class ChatQueryIn(BaseModel):
    # validated by the chat service so bad input gets the {"error": ...} shape
    query: Any = None
class ChatOut(BaseModel):
    response: str
class ChatErrorOut(BaseModel):
    error: str
