"""Figma API client module."""

from wrappers.figma.client.figma_client import (
    FigmaAPIError,
    FigmaClient,
    FigmaClientConfig,
    FigmaRateLimitInfo,
    FigmaTimeoutError,
    get_figma_client,
)

__all__ = [
    "FigmaAPIError",
    "FigmaClient",
    "FigmaClientConfig",
    "FigmaRateLimitInfo",
    "FigmaTimeoutError",
    "get_figma_client",
]
