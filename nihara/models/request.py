"""Request models for the assistant endpoints."""

from typing import Literal
from pydantic import BaseModel, Field


# Aspect ratios documented for image generation. Other values are forwarded
# untouched and left to the remote service to accept or reject.
ASPECT_RATIOS = ("1:1", "3:4", "4:3", "9:16", "16:9")


class InlineData(BaseModel):
    """Inline data for image content."""

    mimeType: str = Field(..., description="MIME type of the data")
    data: str = Field(..., description="Base64 encoded data")


class Part(BaseModel):
    """Part of content, can be text or inline data."""

    text: str | None = Field(default=None, description="Text content")
    inlineData: InlineData | None = Field(default=None, description="Inline data")


class Content(BaseModel):
    """Content with role and parts."""

    role: Literal["user", "model"] = Field(default="user", description="Role of the content")
    parts: list[Part] = Field(..., description="Parts of the content")


class ChatRequest(BaseModel):
    """Request model for the chat endpoint."""

    history: list[Content] = Field(
        default_factory=list, description="Prior turns, oldest first"
    )
    message: str = Field(..., min_length=1, description="New user message")
    systemInstruction: str = Field(default="", description="Persona instruction")
    userName: str = Field(..., description="Display name of the user")
    image: InlineData | None = Field(default=None, description="Optional image attachment")


class AstroRequest(BaseModel):
    """Request model for the astrology prediction endpoint."""

    userInfo: str = Field(..., description="Free-text details about the user")


class ImageRequest(BaseModel):
    """Request model for the image generation endpoint."""

    prompt: str = Field(..., description="Description of the image")
    size: str = Field(default="1:1", description="Aspect ratio (e.g., '1:1', '16:9')")
