"""Error types raised by the card store and ticket pipeline."""


class CardError(Exception):
    """Base class for opinion card errors."""


class ValidationError(CardError, ValueError):
    """Card input is missing required fields or breaks a store invariant."""


class NotFoundError(CardError, LookupError):
    """Raised when an operation references an unknown card id."""

    def __init__(self, card_id: str):
        super().__init__(f"Card not found: {card_id}")
        self.card_id = card_id


class SummarizationError(CardError):
    """External summarization failed (timeout, transport, quota, empty response)."""

    def __init__(self, cause: str):
        super().__init__(f"Summarization failed: {cause}")
        self.cause = cause
