"""Data models for the application."""

from .request import ASPECT_RATIOS, AstroRequest, ChatRequest, Content, ImageRequest, InlineData, Part
from .response import AspectRatiosResponse, ImageResponse, TextResponse

__all__ = [
    "ASPECT_RATIOS",
    "AstroRequest",
    "ChatRequest",
    "Content",
    "ImageRequest",
    "InlineData",
    "Part",
    "AspectRatiosResponse",
    "ImageResponse",
    "TextResponse",
]
