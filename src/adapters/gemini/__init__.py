"""Upstream adapters - Gemini generateContent client."""

from .client import GeminiContentGenerator

__all__ = ["GeminiContentGenerator"]
