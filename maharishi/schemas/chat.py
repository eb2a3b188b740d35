"""
Pydantic schemas for the Agri Q&A chat endpoints.
"""

from typing import List, Literal

from pydantic import BaseModel, Field, field_validator


class ChatTurn(BaseModel):
    """One entry of a session transcript."""
    role: Literal["user", "assistant"] = Field(
        ...,
        description="Who produced the text",
        examples=["user", "assistant"]
    )
    text: str = Field(
        ...,
        description="Full text of the turn",
        examples=["Which fertilizer is best for wheat?"]
    )


class ChatMessageRequest(BaseModel):
    """Message sent by the farmer to an open session."""
    message: str = Field(
        ...,
        description="Farmer's question",
        min_length=1,
        max_length=4000,
        examples=["How do I protect my tomato plants from blight?"]
    )

    @field_validator("message")
    @classmethod
    def message_not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("message must not be blank")
        return value


class ChatSessionCreateResponse(BaseModel):
    """
    Response for a newly opened chat session.

    greeting holds the assistant's first reply, produced by sending the
    greeting prompt on the farmer's behalf.
    """
    session_id: str = Field(..., description="Identifier for follow-up calls")
    greeting: str = Field(
        ...,
        description="Assistant's opening message",
        examples=["Namaste! I am Maharishi, your AI farming assistant. How can I help you today?"]
    )
    ai_enabled: bool = Field(..., description="False when no Gemini key is configured")


class ChatTranscriptResponse(BaseModel):
    """Ordered transcript of a session."""
    session_id: str
    turns: List[ChatTurn]
