"""Shared utility functions for Review Assistant."""


def split_questions(text: str) -> list[str]:
    """Split a one-question-per-line block into trimmed, non-blank questions."""
    return [line.strip() for line in text.split("\n") if line.strip()]


def format_review_text(items) -> str:
    """Render question/answer pairs as plain text, one blank line between pairs."""
    return "\n\n".join(f"{item.question}\n{item.answer}" for item in items)
