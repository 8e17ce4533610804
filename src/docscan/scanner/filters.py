"""Relevance filter for invoice files."""

KEYWORDS = ("invoice", "rechnung")


def is_relevant_file(name: str) -> bool:
    """Return True if the base name contains an invoice keyword, ignoring case."""
    lowered = name.lower()
    return any(keyword in lowered for keyword in KEYWORDS)
