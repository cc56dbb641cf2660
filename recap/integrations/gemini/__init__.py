from .client import GeminiClient, DEFAULT_MODEL, GenerationSettings

__all__ = [
    'GeminiClient',
    'DEFAULT_MODEL',
    'GenerationSettings',
]
