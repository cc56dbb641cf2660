"""
API Routes Package

Centralizes route management with proper module organization
and clean import structure.
"""

from api.routes import transcripts
from api.routes import summaries
from api.routes import notifications

__all__ = ["transcripts", "summaries", "notifications"]
