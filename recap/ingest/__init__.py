from .extractor import TranscriptIngestor

__all__ = ['TranscriptIngestor']
