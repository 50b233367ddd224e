"""
Google GenAI Provider
"""

from postcard.core.ai.providers.genai.image import GenAIImageProvider

__all__ = ["GenAIImageProvider"]
