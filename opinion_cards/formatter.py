"""Render cards into the summarization prompt and the ticket document."""
from .models import Card, TicketMetadata


SEPARATOR = "----"
NO_SUGGESTIONS = "No suggestions available."
SUMMARY_HEADING = "h2. AI-Generated PRD Summary"

_METADATA_LABELS = ("Card ID", "Category", "Approval Count", "Rejection Count")


def build_prompt(card: Card, notes: str = "") -> str:
    """Flatten a card into the plain-text block sent for summarization."""
    lines = [
        f"Main Idea: {card.content}",
        "",
        f"Category: {card.category}",
        f"Approvals: {card.approved_count}, Rejections: {card.rejected_count}",
        "",
    ]

    if notes.strip():
        lines.extend([f"Additional Description: {notes}", ""])

    if card.suggestions:
        lines.append("Suggestions:")
        lines.extend([
            f"{i}. {s.suggestion} (by {s.author})"
            for i, s in enumerate(card.suggestions, 1)
        ])

    return "\n".join(lines).rstrip("\n") + "\n"


def build_ticket_document(
    card: Card,
    notes: str = "",
    generated_summary: str | None = None
) -> str:
    """Render the ticket document: summary, description, metadata, suggestions."""
    lines = [
        "Summary",
        f"PB: {card.content}",
        "Description",
        "",
    ]

    # Description
    if notes.strip():
        lines.extend([notes, ""])
    elif card.suggestions:
        lines.append("Suggestion Highlights:")
        lines.extend([f"- {s.suggestion}" for s in card.suggestions])
        lines.append("")

    # Metadata
    values = (card.id, card.category, card.approved_count, card.rejected_count)
    lines.extend(f"{label}: {value}" for label, value in zip(_METADATA_LABELS, values))
    lines.append("")

    # Suggestions
    if card.suggestions:
        lines.extend(["h2. Suggestions", ""])
        for s in card.suggestions:
            lines.extend([
                SEPARATOR,
                f"Suggestion: {s.suggestion}",
                f"By: {s.author}",
                f"Date: {s.date.isoformat()}",
                SEPARATOR,
                "",
            ])
    else:
        lines.extend([NO_SUGGESTIONS, ""])

    if generated_summary is not None:
        lines.extend([SUMMARY_HEADING, "", generated_summary])

    return "\n".join(lines)


def parse_ticket_metadata(document: str) -> TicketMetadata:
    """Read back the metadata block of a rendered ticket document.

    The block is the first run of four consecutive lines carrying the
    metadata labels in order, so labeled lines inside user notes do not
    shadow it unless they repeat the whole block.
    """
    prefixes = [f"{label}: " for label in _METADATA_LABELS]
    lines = document.split("\n")

    for start in range(len(lines) - len(prefixes) + 1):
        window = lines[start:start + len(prefixes)]
        if all(line.startswith(prefix) for line, prefix in zip(window, prefixes)):
            values = [line[len(prefix):] for line, prefix in zip(window, prefixes)]
            try:
                return TicketMetadata(
                    card_id=values[0],
                    category=values[1],
                    approved_count=int(values[2]),
                    rejected_count=int(values[3]),
                )
            except ValueError:
                continue

    raise ValueError("No metadata block found in ticket document")
