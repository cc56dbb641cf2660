"""
Shared data models for meeting summarization.
"""

from dataclasses import dataclass, field, asdict
from typing import Dict, List, Any

LIST_FIELDS = ("action_items", "decisions", "follow_ups", "risks")


@dataclass
class SummaryFields:
    """Structured summary of a meeting transcript."""
    summary: str = ""
    action_items: List[str] = field(default_factory=list)
    decisions: List[str] = field(default_factory=list)
    follow_ups: List[str] = field(default_factory=list)
    risks: List[str] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    @property
    def is_empty(self) -> bool:
        return not self.summary and not any(getattr(self, name) for name in LIST_FIELDS)
