"""Command-line runner: import cards, show the dashboard, generate a PRD ticket."""
import argparse
import asyncio
import logging
from pathlib import Path

from .aggregation import activity_totals, category_distribution, recent_suggestions
from .client import AnthropicSummarizer, Summarizer
from .config import load_settings
from .csv_loader import load_cards
from .errors import CardError
from .orchestrator import TicketGenerator
from .store import CardStore


def _print_dashboard(store: CardStore) -> None:
    cards = store.list_cards()

    print("CARD CATEGORIES:")
    for category, count in category_distribution(cards).items():
        print(f"  {category}: {count}")

    totals = activity_totals(cards)
    print("\nACTIVITY:")
    print(f"  Approved: {totals.approved}")
    print(f"  Rejected: {totals.rejected}")
    print(f"  Suggestions: {totals.suggestions}")

    recent = recent_suggestions(cards)
    if recent:
        print("\nRECENT SUGGESTIONS:")
        for entry in recent:
            print(f"  \"{entry.card_content}\" - {entry.suggestion} ({entry.author})")


async def run_pipeline(
    csv_path: Path,
    card_id: str | None = None,
    notes: str = "",
    summarizer: Summarizer | None = None,
    output_dir: Path | None = None
) -> Path | None:
    """Run import → dashboard → ticket generation and save the document."""
    print("=== Opinion Cards PRD Generator ===\n")

    if not csv_path.exists():
        print(f"Error: {csv_path} not found")
        return None

    settings = load_settings()
    output_dir = output_dir or settings.data_dir / "tickets"

    # Import
    print(f"Loading cards from {csv_path}...")
    store = CardStore()
    cards = load_cards(csv_path, store)
    print(f"Loaded {len(cards)} cards\n")
    if not cards:
        print("No cards to summarize.")
        return None

    _print_dashboard(store)

    # Pick the most voted card unless one was requested
    if card_id is None:
        card_id = max(cards, key=lambda c: c.approved_count + c.rejected_count).id

    # The id becomes the ticket file name
    if "/" in card_id or "\\" in card_id or card_id in (".", ".."):
        print(f"Error: card id {card_id!r} cannot be used as a file name")
        return None

    try:
        card = store.get(card_id)
        generator = TicketGenerator(store, summarizer or AnthropicSummarizer(settings))
        print(f"\nGenerating PRD for card {card_id}: \"{card.content}\"...")
        document = await generator.generate(card_id, notes)
    except (CardError, ValueError) as e:
        print(f"Error: {e}")
        return None
    if document is None:
        print("Error: generation already in progress for this card")
        return None
    print("✓ PRD generated\n")

    output_dir.mkdir(parents=True, exist_ok=True)
    ticket_file = output_dir / f"{card_id}.md"
    ticket_file.write_text(document, encoding="utf-8")
    print(f"✓ Saved to {ticket_file}\n")

    print("=" * 60)
    print(document)
    print("=" * 60)
    return ticket_file


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Generate a PRD ticket from opinion cards.")
    parser.add_argument("csv_path", type=Path, nargs="?", default=Path("data") / "cards.csv")
    parser.add_argument("--card-id", help="card to summarize (default: most voted)")
    parser.add_argument("--notes", default="", help="additional description for the ticket")
    parser.add_argument("--output-dir", type=Path, help="where to write the ticket (default: <data_dir>/tickets)")
    parser.add_argument("--log-level", default="WARNING")
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=args.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s"
    )

    ticket_file = asyncio.run(run_pipeline(
        args.csv_path,
        card_id=args.card_id,
        notes=args.notes,
        output_dir=args.output_dir
    ))
    return 0 if ticket_file else 1


if __name__ == "__main__":
    raise SystemExit(main())
