"""Response models for the assistant endpoints."""

from pydantic import BaseModel, Field


class TextResponse(BaseModel):
    """Display-ready text returned by the chat and astrology endpoints."""

    text: str = Field(..., description="Generated text or a fallback message")


class ImageResponse(BaseModel):
    """Response model for the image generation endpoint."""

    image: str | None = Field(
        default=None, description="data:image/jpeg;base64 URI, or null when no image is available"
    )


class AspectRatiosResponse(BaseModel):
    """Documented aspect ratios for image generation."""

    aspectRatios: list[str] = Field(..., description="Supported aspect ratios")
