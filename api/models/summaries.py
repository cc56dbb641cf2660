"""
Summarization Data Models

Defines request and response structures for the summarization endpoint.

Design Considerations:
- Request fields optional at the schema level so absence is reported
  with the same message as blank values
- Response always carries all five fields
"""

from typing import List, Optional

from pydantic import BaseModel, Field

from recap.summarization.models import SummaryFields


class SummarizeRequest(BaseModel):
    """
    Request model for transcript summarization.
    """
    text: Optional[str] = Field(
        default=None,
        description="Raw meeting transcript"
    )
    instruction: Optional[str] = Field(
        default=None,
        description="Directive steering the style and focus of the summary"
    )


class SummarizeResponse(BaseModel):
    """
    Structured meeting summary.

    Every field is present; fields the model did not produce are empty.
    """
    summary: str = Field(
        default="",
        description="Narrative summary of the meeting"
    )
    action_items: List[str] = Field(
        default_factory=list,
        description="Tasks agreed during the meeting"
    )
    decisions: List[str] = Field(
        default_factory=list,
        description="Decisions taken"
    )
    follow_ups: List[str] = Field(
        default_factory=list,
        description="Topics requiring follow-up"
    )
    risks: List[str] = Field(
        default_factory=list,
        description="Risks raised"
    )

    @classmethod
    def from_fields(cls, fields: SummaryFields) -> "SummarizeResponse":
        return cls(**fields.to_dict())
