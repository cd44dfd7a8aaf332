"""Gemini gateway for chat, astrology predictions and image generation."""

import base64
from collections.abc import Callable, Iterator, Sequence

from google import genai
from google.genai import types
from loguru import logger

from nihara.config import settings
from nihara.models.request import Content, InlineData, Part
from nihara.services.prompts import (
    ASTRO_ERROR_MESSAGE,
    ASTRO_MISSING_KEY_MESSAGE,
    CHAT_ERROR_MESSAGE,
    CHAT_MISSING_KEY_MESSAGE,
    CHAT_MODEL,
    CHAT_TEMPERATURE,
    CHAT_TOP_P,
    IMAGE_COUNT,
    IMAGE_MIME_TYPE,
    IMAGE_MODEL,
    build_astro_prompt,
    build_image_prompt,
    build_system_instruction,
)


PLACEHOLDER_API_KEY = "YOUR_GEMINI_API_KEY_HERE"


def _settings_api_key() -> str | None:
    return settings.gemini_api_key


def _decode_inline_data(data: InlineData) -> types.Part:
    return types.Part.from_bytes(
        data=base64.b64decode(data.data),
        mime_type=data.mimeType,
    )


def _to_sdk_parts(part: Part) -> Iterator[types.Part]:
    if part.text is not None:
        yield types.Part.from_text(text=part.text)
    if part.inlineData is not None:
        yield _decode_inline_data(part.inlineData)


def _to_sdk_content(turn: Content) -> types.Content:
    parts = [sdk_part for part in turn.parts for sdk_part in _to_sdk_parts(part)]
    return types.Content(role=turn.role, parts=parts)


class AIGatewayClient:
    """Gateway that turns assistant intents into Gemini calls.

    Every public operation resolves to a display-ready value. Failures are
    logged and collapsed into a fixed fallback string, or None for images.
    """

    def __init__(
        self,
        api_key_provider: Callable[[], str | None] = _settings_api_key,
        client_factory: Callable[..., genai.Client] = genai.Client,
    ):
        self._api_key_provider = api_key_provider
        self._client_factory = client_factory
        self._client: genai.Client | None = None
        self._client_key: str | None = None

    async def get_client(self) -> genai.Client | None:
        """
        Return an SDK client for the configured API key.

        Returns None, without raising, when the key is missing or still the
        placeholder value. The client is reused while the key is unchanged;
        a client built for a previous key is closed before being replaced.
        """
        api_key = self._api_key_provider()
        if not api_key or api_key == PLACEHOLDER_API_KEY:
            logger.error("Gemini API key not found or is a placeholder. Set GEMINI_API_KEY.")
            await self.close()
            return None

        if self._client is None or api_key != self._client_key:
            await self.close()
            self._client = self._client_factory(api_key=api_key)
            self._client_key = api_key
        return self._client

    async def close(self) -> None:
        """Close the cached SDK client and its connection pools."""
        client, self._client, self._client_key = self._client, None, None
        if client is None:
            return

        try:
            await client.aio.aclose()
            client.close()
        except Exception as e:
            logger.warning(f"Failed to close Gemini client cleanly: {e}")

    async def get_chat_response(
        self,
        history: Sequence[Content],
        new_message: str,
        system_instruction: str,
        user_name: str,
        image: InlineData | None = None,
    ) -> str:
        """
        Continue a conversation.

        Args:
            history: Prior turns, oldest first. Forwarded in order.
            new_message: Text of the new user turn
            system_instruction: Persona instruction supplied by the caller
            user_name: Display name used to personalize the reply
            image: Optional attachment placed before the text of the new turn

        Returns:
            The model's reply text, or a fallback message
        """
        try:
            client = await self.get_client()
            if client is None:
                return CHAT_MISSING_KEY_MESSAGE

            user_parts = [types.Part.from_text(text=new_message)]
            if image is not None:
                user_parts.insert(0, _decode_inline_data(image))

            contents = [_to_sdk_content(turn) for turn in history]
            contents.append(types.Content(role="user", parts=user_parts))

            config = types.GenerateContentConfig(
                system_instruction=build_system_instruction(system_instruction, user_name),
                temperature=CHAT_TEMPERATURE,
                top_p=CHAT_TOP_P,
            )

            logger.info(f"Requesting chat response from {CHAT_MODEL} ({len(history)} prior turns)")
            response = await client.aio.models.generate_content(
                model=CHAT_MODEL,
                contents=contents,
                config=config,
            )

            if response.text is None:
                raise ValueError("Chat response contained no text")
            return response.text

        except Exception as e:
            logger.exception(f"Error getting chat response: {e}")
            return CHAT_ERROR_MESSAGE

    async def get_astro_prediction(self, user_info: str) -> str:
        """Generate a short horoscope for the described user."""
        try:
            client = await self.get_client()
            if client is None:
                return ASTRO_MISSING_KEY_MESSAGE

            logger.info(f"Requesting astro prediction from {CHAT_MODEL}")
            response = await client.aio.models.generate_content(
                model=CHAT_MODEL,
                contents=build_astro_prompt(user_info),
            )

            if response.text is None:
                raise ValueError("Astro response contained no text")
            return response.text

        except Exception as e:
            logger.exception(f"Error getting astro prediction: {e}")
            return ASTRO_ERROR_MESSAGE

    async def generate_image(self, prompt: str, size: str) -> str | None:
        """
        Generate one JPEG image.

        Args:
            prompt: Description of the image
            size: Aspect ratio, forwarded as-is (e.g., '1:1', '9:16')

        Returns:
            A data:image/jpeg;base64 URI, or None when no image was produced
        """
        try:
            client = await self.get_client()
            if client is None:
                return None

            logger.info(f"Requesting image from {IMAGE_MODEL} (aspect ratio: {size})")
            response = await client.aio.models.generate_images(
                model=IMAGE_MODEL,
                prompt=build_image_prompt(prompt),
                config=types.GenerateImagesConfig(
                    number_of_images=IMAGE_COUNT,
                    output_mime_type=IMAGE_MIME_TYPE,
                    aspect_ratio=size,
                ),
            )

            if not response.generated_images:
                logger.warning("Image request succeeded but no images in response")
                return None

            image = response.generated_images[0].image
            if image is None or not image.image_bytes:
                logger.warning("First generated image carried no bytes")
                return None

            encoded = base64.b64encode(image.image_bytes).decode("ascii")
            return f"data:{IMAGE_MIME_TYPE};base64,{encoded}"

        except Exception as e:
            logger.exception(f"Error generating image: {e}")
            return None


_gateway: AIGatewayClient | None = None


async def get_gateway() -> AIGatewayClient:
    """Get or create the shared gateway."""
    global _gateway
    if _gateway is None:
        _gateway = AIGatewayClient()
    return _gateway


async def close_gateway() -> None:
    """Release the shared gateway."""
    global _gateway
    if _gateway is not None:
        await _gateway.close()
        _gateway = None
