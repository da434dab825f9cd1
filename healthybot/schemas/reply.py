"""Pydantic schemas for outbound reply messages."""

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field


class TextReply(BaseModel):
    """Plain text message sent back to the user."""

    model_config = ConfigDict(frozen=True)

    type: Literal["text"] = "text"
    text: str = Field(..., description="Message text")


# The bot only ever replies with text
ReplyMessage = TextReply
