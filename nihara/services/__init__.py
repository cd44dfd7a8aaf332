"""Services for the application."""

from .gateway import AIGatewayClient, close_gateway, get_gateway

__all__ = [
    "AIGatewayClient",
    "close_gateway",
    "get_gateway",
]
