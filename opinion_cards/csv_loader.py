"""CSV import of seed cards."""
import logging
from pathlib import Path

import pandas as pd

from .errors import CardError
from .models import Card
from .store import CardStore

logger = logging.getLogger(__name__)

REQUIRED_COLUMNS = ("content", "category", "duration")


def _optional_str(row, column: str) -> str | None:
    value = row.get(column)
    if value is None or pd.isna(value):
        return None
    value = str(value).strip()
    return value or None


def _count(row, column: str) -> int:
    value = row.get(column)
    if value is None or pd.isna(value):
        return 0
    if not float(value).is_integer():
        raise ValueError(f"{column} must be a whole number, got {value}")
    return int(value)


def load_cards(csv_path: Path, store: CardStore) -> list[Card]:
    """Load cards from CSV into the store.

    Required columns: content, category, duration.
    Optional: id, image_url, approved_count, rejected_count.
    Rows that fail validation are skipped.
    """
    df = pd.read_csv(csv_path, dtype={"id": str})

    missing = [c for c in REQUIRED_COLUMNS if c not in df.columns]
    if missing:
        raise ValueError(f"{csv_path} is missing required columns: {', '.join(missing)}")

    cards = []
    for idx, row in df.iterrows():
        draft = {
            "content": _optional_str(row, "content") or "",
            "category": _optional_str(row, "category") or "",
            "duration": _optional_str(row, "duration") or "",
            "image_url": _optional_str(row, "image_url"),
        }

        try:
            approved = _count(row, "approved_count")
            rejected = _count(row, "rejected_count")
            if approved < 0 or rejected < 0:
                raise ValueError("vote counts must be non-negative")

            # Keep ids from the file so tickets can be requested by id
            card = store.create(draft, card_id=_optional_str(row, "id"))
            if approved or rejected:
                card = store.update(card.id, approved_count=approved, rejected_count=rejected)
        except (CardError, ValueError) as e:
            logger.warning("Skipping row %s of %s: %s", idx, csv_path, e)
            continue

        cards.append(card)

    logger.info("Loaded %d cards from %s", len(cards), csv_path)
    return cards
