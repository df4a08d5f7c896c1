"""
Document record shared with the document catalog.

The catalog itself lives outside this service; only the fields the translation
flow reads are modelled strictly.
"""
from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, Field

from .translation import TranslationRequest


class Document(BaseModel):
    """
    A catalogued document with its AI-generated summary and insights.
    """
    id: str
    title: str
    description: Optional[str] = None
    category: str
    ai_summary: str
    key_insights: List[str] = Field(default_factory=list)
    tags: List[str] = Field(default_factory=list)
    status: str
    created_date: datetime
    page_count: Optional[int] = None
    file_size: Optional[int] = None  # bytes

    def translation_request(self, target_language: str) -> TranslationRequest:
        """
        Build the request the document viewer sends when a language is picked.

        Args:
            target_language: Short language code selected by the user

        Returns:
            TranslationRequest carrying the summary and insights of this document
        """
        return TranslationRequest(
            text=self.ai_summary,
            insights=list(self.key_insights or []),
            target_language=target_language,
        )
