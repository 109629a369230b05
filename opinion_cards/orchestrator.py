"""Ticket generation: prompt, summarize, merge the result, render the document."""
import logging
import uuid
from datetime import datetime, timezone
from typing import Callable

from .client import Summarizer
from .errors import SummarizationError
from .formatter import build_prompt, build_ticket_document
from .models import AUTOMATED_AUTHOR, GenerationState, Suggestion
from .store import CardStore

logger = logging.getLogger(__name__)


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class TicketGenerator:
    """Generates PRD ticket documents for cards in a CardStore.

    Each card moves IDLE -> GENERATING -> SUCCEEDED | FAILED. A request for
    a card that is already GENERATING is dropped, not queued. A failed run
    leaves the store untouched and drops the card back to IDLE before the
    error reaches the caller, so state() never reports FAILED; the raised
    SummarizationError is how a failure is observed.
    """

    def __init__(
        self,
        store: CardStore,
        summarizer: Summarizer,
        clock: Callable[[], datetime] = _utcnow
    ):
        self.store = store
        self.summarizer = summarizer
        self.clock = clock
        self._states: dict[str, GenerationState] = {}
        self._documents: dict[str, str] = {}

    def state(self, card_id: str) -> GenerationState:
        return self._states.get(card_id, GenerationState.IDLE)

    def last_document(self, card_id: str) -> str | None:
        """Most recent successfully generated document for the card."""
        return self._documents.get(card_id)

    async def generate(self, card_id: str, notes: str = "") -> str | None:
        """Generate the ticket document for a card.

        Returns the document, or None when a generation for this card is
        already in flight. Raises NotFoundError for unknown cards and
        SummarizationError when the summarizer fails.
        """
        # Both checks run before the first await so the guard needs no lock
        card = self.store.get(card_id)
        if self.state(card_id) is GenerationState.GENERATING:
            logger.warning("Generation already in progress for card %s; ignoring request", card_id)
            return None

        self._states[card_id] = GenerationState.GENERATING
        logger.info("Generating ticket for card %s (%d suggestions)", card_id, len(card.suggestions))

        try:
            prompt = build_prompt(card, notes)
            generated = await self.summarizer.summarize(prompt)
        except SummarizationError as e:
            self._states[card_id] = GenerationState.FAILED
            logger.info("Ticket generation failed for card %s: %s", card_id, e.cause)
            self._states[card_id] = GenerationState.IDLE
            raise
        finally:
            if self._states.get(card_id) is GenerationState.GENERATING:
                # Cancelled or unexpected error: nothing was appended
                self._states[card_id] = GenerationState.IDLE

        # Re-read so suggestions added during the await are kept
        current = self.store.get(card_id)
        suggestion = Suggestion(
            id=uuid.uuid4().hex,
            suggestion=generated,
            author=AUTOMATED_AUTHOR,
            date=self.clock(),
        )
        updated = self.store.update(card_id, suggestions=current.suggestions + (suggestion,))

        document = build_ticket_document(updated, notes, generated_summary=generated)
        self._documents[card_id] = document
        self._states[card_id] = GenerationState.SUCCEEDED
        logger.info("Ticket generated for card %s", card_id)
        return document
