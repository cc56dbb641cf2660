from .gemini.client import GeminiClient

__all__ = [
    'GeminiClient',
]
