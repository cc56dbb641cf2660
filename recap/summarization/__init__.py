"""
Summarization package initialization.
"""

from .models import SummaryFields, LIST_FIELDS
from .parser import coerce_fields, coerce_summary, extract_json_object
from .gateway import SummarizationGateway

__all__ = [
    'SummaryFields',
    'LIST_FIELDS',
    'coerce_fields',
    'coerce_summary',
    'extract_json_object',
    'SummarizationGateway',
]
