"""Pydantic model for the echo endpoint."""

from pydantic import BaseModel


class Message(BaseModel):
    name: str = ""
    content: str = ""

    model_config = {
        "strict": True,
    }
