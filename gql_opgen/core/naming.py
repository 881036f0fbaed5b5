"""Identifier and literal helpers shared by the emitters and templates."""

import re


def snake_case(name: str) -> str:
    """Convert PascalCase or camelCase to snake_case."""
    s1 = re.sub("(.)([A-Z][a-z]+)", r"\1_\2", name)
    return re.sub("([a-z0-9])([A-Z])", r"\1_\2", s1).lower()


def pascal_case(name: str) -> str:
    """Convert snake_case or camelCase to PascalCase."""
    return "".join(word.capitalize() for word in snake_case(name).split("_"))


def safe_comment(text: str) -> str:
    """Make text safe for a single-line comment.

    Removes newlines, collapses whitespace and truncates very long text.
    """
    if not text:
        return ""
    text = text.replace("\n", " ").replace("\r", "")
    text = re.sub(r"\s+", " ", text)
    if len(text) > 160:
        text = text[:157] + "..."
    return text.strip()


def csharp_verbatim(text: str) -> str:
    """Escape text for a C# verbatim string literal (@"...")."""
    return text.replace('"', '""')
