"""In-memory card store: the single owner of cards and their suggestion history."""
import logging
import uuid
from datetime import datetime, timezone
from typing import Any, Mapping

import pydantic

from .errors import NotFoundError, ValidationError
from .models import Card, CardDraft, Suggestion

logger = logging.getLogger(__name__)


def _validation_message(error: pydantic.ValidationError) -> str:
    parts = []
    for item in error.errors():
        field = ".".join(str(loc) for loc in item["loc"]) or "card"
        parts.append(f"{field}: {item['msg']}")
    return "; ".join(parts)


class CardStore:
    """Holds cards keyed by id, in insertion order.

    Every mutation replaces the stored Card with a new instance, so a Card
    returned earlier is never changed underneath its holder.
    """

    def __init__(self, cards: list[Card] | None = None):
        self._cards: dict[str, Card] = {}
        for card in cards or []:
            self.add(card)

    def __len__(self) -> int:
        return len(self._cards)

    def __contains__(self, card_id: str) -> bool:
        return card_id in self._cards

    def create(self, draft: CardDraft | Mapping[str, Any], card_id: str | None = None) -> Card:
        """Create a card from creation form fields, assigning id and defaults.

        A card_id is only given when importing cards that already have one.
        """
        if not isinstance(draft, CardDraft):
            try:
                draft = CardDraft.model_validate(dict(draft))
            except pydantic.ValidationError as e:
                raise ValidationError(_validation_message(e)) from e

        if card_id is not None and card_id in self._cards:
            raise ValidationError(f"Card already exists: {card_id}")

        card = Card(
            id=card_id or uuid.uuid4().hex,
            content=draft.content,
            category=draft.category,
            duration=draft.duration,
            image_url=draft.image_url,
        )
        self._cards[card.id] = card
        logger.debug("Created card %s (%s)", card.id, card.category)
        return card

    def add(self, card: Card) -> Card:
        """Take ownership of a card built elsewhere."""
        if card.id in self._cards:
            raise ValidationError(f"Card already exists: {card.id}")
        self._cards[card.id] = card
        return card

    def get(self, card_id: str) -> Card:
        try:
            return self._cards[card_id]
        except KeyError:
            raise NotFoundError(card_id) from None

    def list_cards(self) -> list[Card]:
        return list(self._cards.values())

    def update(self, card_id: str, **fields) -> Card:
        """Shallow-merge the given fields into the card and store the result.

        Only type shape is checked, plus the two single-field rules the
        store owns: suggestion history is append-only and vote counts
        never go down.
        """
        card = self.get(card_id)

        if "id" in fields and fields["id"] != card_id:
            raise ValidationError("Card id is immutable")

        try:
            updated = Card.model_validate({**dict(card), **fields})
        except pydantic.ValidationError as e:
            raise ValidationError(_validation_message(e)) from e

        existing = card.suggestions
        if updated.suggestions[:len(existing)] != existing:
            raise ValidationError("Suggestions are append-only; existing entries must be kept in order")
        if updated.approved_count < card.approved_count or updated.rejected_count < card.rejected_count:
            raise ValidationError("Vote counts cannot decrease")

        self._cards[card_id] = updated
        logger.debug("Updated card %s: %s", card_id, ", ".join(sorted(fields)))
        return updated

    def record_vote(self, card_id: str, approved: bool) -> Card:
        """Apply one approve or reject vote."""
        card = self.get(card_id)
        if approved:
            return self.update(card_id, approved_count=card.approved_count + 1)
        return self.update(card_id, rejected_count=card.rejected_count + 1)

    def add_suggestion(
        self,
        card_id: str,
        text: str,
        author: str,
        date: datetime | None = None
    ) -> Card:
        """Append a single suggestion to the card's history."""
        if not text or not text.strip():
            raise ValidationError("Suggestion text is required")

        card = self.get(card_id)
        suggestion = Suggestion(
            id=uuid.uuid4().hex,
            suggestion=text,
            author=author,
            date=date or datetime.now(timezone.utc),
        )
        return self.update(card_id, suggestions=card.suggestions + (suggestion,))
