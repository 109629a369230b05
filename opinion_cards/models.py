"""Data models for cards, suggestions and dashboard views."""
from datetime import datetime, timezone
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, field_validator


CATEGORIES = ("WIS", "ETS", "MIS ONE", "Sales", "Support", "Tech")
DURATIONS = ("1 hour", "3 hours", "10 hours", "1 day", "3 days", "5 days", "10 days")

# Author recorded on suggestions produced by the summarization service
AUTOMATED_AUTHOR = "AI Assistant"


class Suggestion(BaseModel):
    """Feedback attached to a card, human or automated."""
    model_config = ConfigDict(frozen=True)

    id: str
    suggestion: str = Field(min_length=1)
    author: str
    date: datetime

    @field_validator("date")
    @classmethod
    def _assume_utc(cls, value: datetime) -> datetime:
        # Naive timestamps are taken as UTC so all dates stay comparable
        if value.tzinfo is None:
            return value.replace(tzinfo=timezone.utc)
        return value

    @property
    def is_automated(self) -> bool:
        return self.author == AUTOMATED_AUTHOR


class Card(BaseModel):
    """An opinion statement with its votes and suggestion history.

    Category and duration are plain strings here: values outside the
    enumerated sets are rejected when a card is drafted, not once it exists.
    """
    model_config = ConfigDict(frozen=True, extra="forbid")

    id: str
    content: str = Field(min_length=1)
    category: str
    duration: str
    image_url: str | None = None
    approved_count: int = Field(default=0, ge=0)
    rejected_count: int = Field(default=0, ge=0)
    suggestions: tuple[Suggestion, ...] = ()


class CardDraft(BaseModel):
    """Fields supplied by the card creation form."""
    model_config = ConfigDict(extra="ignore")

    content: str
    category: str
    duration: str
    image_url: str | None = None

    @field_validator("content")
    @classmethod
    def _content_not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("content is required")
        return value

    @field_validator("category")
    @classmethod
    def _known_category(cls, value: str) -> str:
        if value not in CATEGORIES:
            raise ValueError(f"category must be one of {', '.join(CATEGORIES)}")
        return value

    @field_validator("duration")
    @classmethod
    def _known_duration(cls, value: str) -> str:
        if value not in DURATIONS:
            raise ValueError(f"duration must be one of {', '.join(DURATIONS)}")
        return value


class TicketMetadata(BaseModel):
    """Metadata block recovered from a rendered ticket document."""
    card_id: str
    category: str
    approved_count: int
    rejected_count: int


class ActivityTotals(BaseModel):
    """Vote and suggestion totals across all cards."""
    approved: int
    rejected: int
    suggestions: int


class RecentSuggestion(BaseModel):
    """One entry of the dashboard's recent suggestions feed."""
    card_id: str
    card_content: str
    suggestion: str
    author: str
    date: datetime


class GenerationState(str, Enum):
    IDLE = "idle"
    GENERATING = "generating"
    SUCCEEDED = "succeeded"
    FAILED = "failed"
