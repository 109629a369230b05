"""Opinion cards: card store, dashboard aggregates and PRD ticket generation."""

from .aggregation import activity_totals, category_distribution, recent_suggestions
from .client import AnthropicSummarizer, Summarizer
from .errors import CardError, NotFoundError, SummarizationError, ValidationError
from .formatter import build_prompt, build_ticket_document, parse_ticket_metadata
from .models import (
    AUTOMATED_AUTHOR,
    CATEGORIES,
    DURATIONS,
    ActivityTotals,
    Card,
    CardDraft,
    GenerationState,
    Suggestion,
)
from .orchestrator import TicketGenerator
from .store import CardStore

__all__ = [
    "AUTOMATED_AUTHOR",
    "CATEGORIES",
    "DURATIONS",
    "ActivityTotals",
    "AnthropicSummarizer",
    "Card",
    "CardDraft",
    "CardError",
    "CardStore",
    "GenerationState",
    "NotFoundError",
    "SummarizationError",
    "Suggestion",
    "Summarizer",
    "TicketGenerator",
    "ValidationError",
    "activity_totals",
    "build_prompt",
    "build_ticket_document",
    "category_distribution",
    "parse_ticket_metadata",
    "recent_suggestions",
]
