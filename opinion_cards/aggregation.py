"""Dashboard aggregates computed from the current cards."""
from collections import Counter
from typing import Iterable

from .models import CATEGORIES, ActivityTotals, Card, RecentSuggestion


def category_distribution(cards: Iterable[Card]) -> dict[str, int]:
    """Count cards per category.

    Every known category is present, zero included, in the order they are
    offered; unrecognized categories follow in first-seen order.
    """
    counts = Counter(card.category for card in cards)
    distribution = {category: counts.get(category, 0) for category in CATEGORIES}
    for category, count in counts.items():
        if category not in distribution:
            distribution[category] = count
    return distribution


def activity_totals(cards: Iterable[Card]) -> ActivityTotals:
    approved = rejected = suggestions = 0
    for card in cards:
        approved += card.approved_count
        rejected += card.rejected_count
        suggestions += len(card.suggestions)
    return ActivityTotals(approved=approved, rejected=rejected, suggestions=suggestions)


def recent_suggestions(cards: Iterable[Card], limit: int = 5) -> list[RecentSuggestion]:
    """Newest suggestions across all cards, with the card they belong to."""
    entries = [
        RecentSuggestion(
            card_id=card.id,
            card_content=card.content,
            suggestion=s.suggestion,
            author=s.author,
            date=s.date,
        )
        for card in cards
        for s in card.suggestions
    ]
    entries.sort(key=lambda entry: entry.date, reverse=True)
    return entries[:limit]
