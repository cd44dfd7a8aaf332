"""Assistant router exposing chat, astrology and image generation."""

from fastapi import APIRouter, Depends
from loguru import logger

from nihara.models.request import ASPECT_RATIOS, AstroRequest, ChatRequest, ImageRequest
from nihara.models.response import AspectRatiosResponse, ImageResponse, TextResponse
from nihara.services.gateway import AIGatewayClient, get_gateway


router = APIRouter(prefix="/v1")


@router.post(
    "/chat",
    response_model=TextResponse,
    summary="Chat",
    description="Continue a conversation. Always answers with display-ready text.",
)
async def chat(
    request: ChatRequest,
    gateway: AIGatewayClient = Depends(get_gateway),
) -> TextResponse:
    """
    Send the full history plus one new message to the chat model.

    The history is not stored; callers send it on every request.
    """
    logger.info(f"Received chat request ({len(request.history)} prior turns)")
    logger.debug(f"Chat request user name: {request.userName}")
    text = await gateway.get_chat_response(
        history=request.history,
        new_message=request.message,
        system_instruction=request.systemInstruction,
        user_name=request.userName,
        image=request.image,
    )
    return TextResponse(text=text)


@router.post(
    "/astro",
    response_model=TextResponse,
    summary="Astrology prediction",
    description="Generate a short horoscope from free-text user details.",
)
async def astro(
    request: AstroRequest,
    gateway: AIGatewayClient = Depends(get_gateway),
) -> TextResponse:
    logger.info("Received astro prediction request")
    text = await gateway.get_astro_prediction(request.userInfo)
    return TextResponse(text=text)


@router.post(
    "/images",
    response_model=ImageResponse,
    summary="Generate image",
    description="Generate one JPEG image. `image` is null when no image is available.",
)
async def generate_image(
    request: ImageRequest,
    gateway: AIGatewayClient = Depends(get_gateway),
) -> ImageResponse:
    logger.info(f"Received image request (aspect ratio: {request.size})")
    image = await gateway.generate_image(request.prompt, request.size)
    return ImageResponse(image=image)


@router.get(
    "/images/aspect-ratios",
    response_model=AspectRatiosResponse,
    summary="List aspect ratios",
)
async def list_aspect_ratios() -> AspectRatiosResponse:
    """List the documented aspect ratios for image generation."""
    return AspectRatiosResponse(aspectRatios=list(ASPECT_RATIOS))
