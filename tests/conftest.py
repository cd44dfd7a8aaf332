from unittest.mock import AsyncMock, MagicMock

import pytest
from google.genai import types

from nihara.services.gateway import AIGatewayClient


IMAGE_BYTES = b"\xff\xd8\xff\xe0fake-jpeg"


@pytest.fixture
def sdk_client():
    """Stand-in for genai.Client with canned async responses."""
    client = MagicMock()
    client.aio.models.generate_content = AsyncMock(return_value=MagicMock(text="Hello!"))
    client.aio.aclose = AsyncMock()
    client.aio.models.generate_images = AsyncMock(
        return_value=types.GenerateImagesResponse(
            generated_images=[types.GeneratedImage(image=types.Image(image_bytes=IMAGE_BYTES))]
        )
    )
    return client


@pytest.fixture
def client_factory(sdk_client):
    return MagicMock(return_value=sdk_client)


@pytest.fixture
def gateway(client_factory):
    return AIGatewayClient(api_key_provider=lambda: "test-key", client_factory=client_factory)
