# src/flippy/models/payload.py
# Este arquivo contém os modelos de dados utilizados na aplicação.

from pydantic import BaseModel, ConfigDict
from typing import Literal


class SlackCommand(BaseModel):
    model_config = ConfigDict(frozen=True)

    token: str
    trigger_word: str
    text: str


class SlackResponse(BaseModel):
    response_type: Literal["in_channel"] = "in_channel"
    text: str
