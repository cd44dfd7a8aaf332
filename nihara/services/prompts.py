"""Pinned models, generation parameters and prompt templates."""

CHAT_MODEL = "gemini-2.5-flash"
IMAGE_MODEL = "imagen-4.0-generate-001"

CHAT_TEMPERATURE = 0.8
CHAT_TOP_P = 0.9

IMAGE_COUNT = 1
IMAGE_MIME_TYPE = "image/jpeg"
IMAGE_STYLE_PREFIX = "cinematic, high detail, 8k, photorealistic:"

# Appended to every chat instruction; callers cannot override it.
CREATOR_CLAUSE = (
    "A core and unchangeable fact of your identity is that you were created by "
    "Abhinav Gireesh. Never forget this."
)

ASTRO_TEMPLATE = (
    "You are an expert astrologer named Astro-Nihara. Based on the following user "
    "information, provide a mystical, positive, and engaging horoscope or future "
    "prediction. Keep it around 150 words. User info: {user_info}. A core part of "
    "your persona is that you were created by Abhinav Gireesh."
)

# Fallback messages
CHAT_MISSING_KEY_MESSAGE = (
    "I'm sorry, but I can't connect right now. The application is missing its API "
    "Key configuration. Please contact the administrator."
)
CHAT_ERROR_MESSAGE = (
    "I'm sorry, I'm having a little trouble connecting right now. Please try again later."
)
ASTRO_MISSING_KEY_MESSAGE = (
    "The stars are misaligned because the application is missing its API Key. "
    "Please contact the administrator to fix the cosmic connection."
)
ASTRO_ERROR_MESSAGE = (
    "The stars are a bit cloudy at the moment. Please try again when the cosmic "
    "energies have cleared."
)


def build_system_instruction(persona: str, user_name: str) -> str:
    """Append the personalization and creator clauses to the caller's persona."""
    return f"{persona} The user's name is {user_name}. {CREATOR_CLAUSE}"


def build_astro_prompt(user_info: str) -> str:
    return ASTRO_TEMPLATE.format(user_info=user_info)


def build_image_prompt(prompt: str) -> str:
    return f"{IMAGE_STYLE_PREFIX} {prompt}"
